# tests/test_tables.py

import pytest

from calnep.engines import tables as T


def test_year_bounds():
    assert T.MIN_BS_YEAR == 2000
    assert T.MAX_BS_YEAR == 2090
    assert sorted(T.BS_MONTHS) == list(range(T.MIN_BS_YEAR, T.MAX_BS_YEAR + 1))


def test_rows_are_plausible():
    for year, row in T.BS_MONTHS.items():
        assert len(row) == 12, year
        assert all(29 <= n <= 32 for n in row), year
        assert 364 <= sum(row) <= 367, year


def test_table_is_read_only():
    with pytest.raises(TypeError):
        T.BS_MONTHS[2091] = T.BS_MONTHS[2090]  # type: ignore[index]
    with pytest.raises(TypeError):
        T.BS_MONTHS[2080][0] = 30  # type: ignore[index]


def test_ad_month_tables():
    assert sum(T.AD_MONTH) == 365
    assert sum(T.AD_MONTH_LEAP_YEAR) == 366
    assert T.AD_MONTH_LEAP_YEAR[1] == 29


def test_bs_correction_matches_first_row():
    """275 is Baisakh..Poush of the first table year, 18 the anchor day."""
    first = T.BS_MONTHS[T.MIN_BS_YEAR]
    assert sum(first[: T.ANCHOR_BS_MONTH]) + T.ANCHOR_BS_DAY == T.BS_DAY_CORRECTION
    assert T.BS_DAY_CORRECTION == 275 + 18
    assert T.AD_DAY_CORRECTION == 31
