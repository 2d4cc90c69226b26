# tests/test_validators.py

import pytest

from calnep.core.errors import InvalidADYear, InvalidBSYear, InvalidMonthRange
from calnep.engines.validators import (
    ad_month_length,
    ad_year_length,
    bs_month_length,
    bs_year_length,
    is_ad_leap_year,
    is_valid_ad_date,
    is_valid_ad_year,
    is_valid_bs_date,
    is_valid_bs_year,
)


@pytest.mark.parametrize("year,expected", [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)])
def test_ad_leap_year(year, expected):
    assert is_ad_leap_year(year) is expected


def test_year_ranges():
    assert is_valid_bs_year(2000)
    assert is_valid_bs_year(2090)
    assert not is_valid_bs_year(1999)
    assert not is_valid_bs_year(2091)
    assert is_valid_ad_year(1944)
    assert is_valid_ad_year(2034)
    assert not is_valid_ad_year(1943)
    assert not is_valid_ad_year(2035)


def test_first_year_carve_out():
    assert not is_valid_bs_date(2000, 8, 16)
    assert is_valid_bs_date(2000, 8, 17)
    assert is_valid_bs_date(2000, 9, 18)
    assert not is_valid_bs_date(2000, 0, 1)
    assert not is_valid_bs_date(2000, 7, 30)


@pytest.mark.parametrize(
    "year,month,day,expected",
    [
        (2082, 1, 30, True),
        (2082, 1, 31, True),
        (2082, 1, 32, False),
        (2080, 0, 0, False),
        (2080, 12, 1, False),
        (2080, -1, 1, False),
        (2090, 11, 30, True),
        (2090, 11, 31, False),
        (2091, 0, 1, False),
        (1999, 11, 30, False),
    ],
)
def test_bs_dates(year, month, day, expected):
    assert is_valid_bs_date(year, month, day) is expected


@pytest.mark.parametrize(
    "year,month,day,expected",
    [
        (2024, 1, 29, True),
        (2023, 1, 29, False),
        (2000, 1, 29, True),
        (2023, 3, 31, False),
        (2023, 11, 31, True),
        (1944, 0, 1, True),
        (1943, 11, 31, False),
        (2035, 0, 1, False),
        (2023, 12, 1, False),
    ],
)
def test_ad_dates(year, month, day, expected):
    assert is_valid_ad_date(year, month, day) is expected


def test_month_lengths():
    assert bs_month_length(2080, 0) == 31
    assert bs_month_length(2082, 1) == 31
    assert bs_month_length(2000, 8) == 29
    assert ad_month_length(2024, 1) == 29
    assert ad_month_length(2023, 1) == 28
    assert bs_year_length(2081) == 366
    assert bs_year_length(2080) == 365
    assert ad_year_length(2024) == 366


def test_month_length_errors():
    with pytest.raises(InvalidBSYear):
        bs_month_length(2091, 0)
    with pytest.raises(InvalidMonthRange):
        bs_month_length(2080, 12)
    with pytest.raises(InvalidADYear):
        ad_month_length(1943, 0)
    with pytest.raises(InvalidBSYear):
        bs_year_length(1999)
