# tests/test_conversion.py

import random
from datetime import date, datetime, timedelta
from types import MappingProxyType

import pytest

import calnep
from calnep import NepaliDate
from calnep.core.errors import InvalidADDateRange, InvalidBSDateRange, InvalidBSYear
from calnep.engines.specs import NEPAL_BS
from calnep.engines.tables import BS_MONTHS

BS_TO_AD_CASES = [
    ((2080, 0, 4), date(2023, 4, 17)),
    ((2080, 1, 4), date(2023, 5, 18)),
    ((2080, 2, 4), date(2023, 6, 19)),
    ((2080, 3, 4), date(2023, 7, 20)),
    ((2080, 4, 4), date(2023, 8, 21)),
    ((2080, 5, 4), date(2023, 9, 21)),
    ((2080, 6, 4), date(2023, 10, 21)),
    ((2080, 7, 4), date(2023, 11, 20)),
    ((2080, 8, 4), date(2023, 12, 20)),
    ((2080, 9, 4), date(2024, 1, 18)),
    ((2080, 10, 4), date(2024, 2, 16)),
    ((2080, 11, 4), date(2024, 3, 17)),
    ((2081, 8, 9), date(2024, 12, 24)),
    ((2082, 1, 28), date(2025, 6, 11)),
    ((2082, 1, 29), date(2025, 6, 12)),
    ((2082, 1, 30), date(2025, 6, 13)),
]

AD_TO_BS_CASES = [
    (date(2023, 3, 17), (2079, 11, 3)),
    (date(2023, 11, 25), (2080, 7, 9)),
    (date(2024, 1, 1), (2080, 8, 16)),
    (date(2024, 5, 15), (2081, 1, 2)),
    (date(2025, 2, 21), (2081, 10, 9)),
    (date(2022, 1, 1), (2078, 8, 17)),
    (date(2025, 9, 21), (2082, 5, 5)),
    (date(2020, 5, 15), (2077, 1, 2)),
]


@pytest.mark.parametrize("bs,ad", BS_TO_AD_CASES)
def test_bs_to_ad(bs, ad):
    assert calnep.bs_to_ad(bs) == ad
    assert NepaliDate(*bs).to_ad() == ad


@pytest.mark.parametrize("ad,bs", AD_TO_BS_CASES)
def test_ad_to_bs(ad, bs):
    assert calnep.ad_to_bs(ad).to_tuple() == bs
    assert NepaliDate.from_ad(ad) == NepaliDate(*bs)


@pytest.mark.parametrize("bs,ad", BS_TO_AD_CASES)
def test_fixture_round_trip(bs, ad):
    assert calnep.ad_to_bs(calnep.bs_to_ad(bs)).to_tuple() == bs


def test_span_endpoints():
    assert calnep.bs_to_ad((2000, 8, 17)) == date(1944, 1, 1)
    assert calnep.ad_to_bs(date(1944, 1, 1)) == NepaliDate(2000, 8, 17)
    assert calnep.bs_to_ad((2000, 9, 18)) == date(1944, 1, 31)
    assert calnep.ad_to_bs(date(1944, 1, 31)) == NepaliDate(2000, 9, 18)
    assert calnep.bs_to_ad((2090, 11, 30)) == date(2034, 4, 13)
    assert calnep.ad_to_bs(date(2034, 4, 13)) == NepaliDate(2090, 11, 30)


def test_new_years():
    assert calnep.ad_to_bs(date(2023, 4, 14)) == NepaliDate(2080, 0, 1)
    assert calnep.ad_to_bs(date(2024, 4, 13)) == NepaliDate(2081, 0, 1)
    assert calnep.ad_to_bs(date(2025, 4, 14)) == NepaliDate(2082, 0, 1)


def test_bs_range_errors():
    with pytest.raises(InvalidBSDateRange):
        calnep.bs_to_ad((2000, 8, 16))
    with pytest.raises(InvalidBSDateRange):
        calnep.bs_to_ad((2080, 1, 33))
    with pytest.raises(InvalidBSDateRange):
        calnep.bs_to_ad((2091, 0, 1))
    # constructible (year is in the table) but before the first convertible day
    early = NepaliDate(2000, 8, 17).add_days(-1)
    assert early.to_tuple() == (2000, 8, 16)
    with pytest.raises(InvalidBSDateRange):
        early.to_ad()


def test_ad_range_errors():
    with pytest.raises(InvalidADDateRange):
        calnep.ad_to_bs(date(1943, 12, 31))
    with pytest.raises(InvalidADDateRange):
        calnep.ad_to_bs(date(2035, 1, 1))
    with pytest.raises(InvalidADDateRange) as excinfo:
        calnep.ad_to_bs(date(2034, 4, 14))
    assert isinstance(excinfo.value.__cause__, InvalidBSYear)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        calnep.ad_to_bs(date(1900, 1, 1))


def test_datetime_input_uses_date_part():
    assert calnep.ad_to_bs(datetime(2024, 1, 1, 23, 59)) == NepaliDate(2080, 8, 16)


def test_ad_round_trip_random():
    random.seed(42)
    start, end = date(1944, 1, 1), date(2034, 4, 13)
    span = (end - start).days
    for _ in range(2000):
        d = start + timedelta(days=random.randint(0, span))
        assert calnep.bs_to_ad(calnep.ad_to_bs(d)) == d


def test_bs_round_trip_month_edges():
    for year, row in BS_MONTHS.items():
        for month, length in enumerate(row):
            for day in (1, length):
                if year == 2000 and (month, day) < (8, 17):
                    continue
                bs = NepaliDate(year, month, day)
                assert calnep.ad_to_bs(bs.to_ad()) == bs


def test_consecutive_days_stay_consecutive():
    bs = NepaliDate(2080, 11, 25)
    ad = bs.to_ad()
    for i in range(1, 40):
        assert bs.add_days(i).to_ad() == ad + timedelta(days=i)


def test_custom_spec_converter():
    short = MappingProxyType({y: BS_MONTHS[y] for y in range(2000, 2011)})
    conv = calnep.make_converter(NEPAL_BS.tweak(bs_months=short))
    assert conv.bs_to_ad(2005, 0, 1) == date(1948, 4, 13)
    assert conv.ad_to_bs(date(1948, 4, 13)) == (2005, 0, 1)
    with pytest.raises(InvalidADDateRange):
        conv.ad_to_bs(date(1960, 1, 1))


def test_factory_rejects_malformed_rows():
    with pytest.raises(ValueError):
        calnep.make_converter(NEPAL_BS.tweak(bs_months={2000: (30,) * 11}))
    with pytest.raises(ValueError):
        calnep.make_converter(NEPAL_BS.tweak(bs_months={}))


def test_supported_range():
    rng = calnep.supported_range()
    assert rng["first_bs"] == (2000, 8, 17)
    assert rng["last_bs"] == (2090, 11, 30)
    assert rng["first_ad"] == date(1944, 1, 1)
    assert rng["last_ad"] == date(2034, 4, 13)


@pytest.mark.parametrize("bs", [(2080, 0, 4.9), (2080.0, 0, 4), (2080, "0", 4), (2080, True, 4)])
def test_bs_triple_requires_ints(bs):
    with pytest.raises(TypeError):
        calnep.bs_to_ad(bs)
