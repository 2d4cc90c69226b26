# tests/test_format.py

from datetime import date

import pytest

from calnep import NepaliDate
from calnep.format import format, format_iso, format_long, format_medium, format_short, ordinal
from calnep.locale import month_name, short_month_name, weekday_name

AD = date(2025, 6, 3)


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("yyyy", "2025"),
        ("yy", "25"),
        ("MMMM", "June"),
        ("MMM", "Jun"),
        ("MM", "06"),
        ("M", "6"),
        ("dd", "03"),
        ("d", "3"),
        ("do", "3rd"),
        ("yyyy-MM-dd", "2025-06-03"),
        ("MMMM do, yyyy", "June 3rd, 2025"),
        ("Day dd", "Day 03"),
    ],
)
def test_tokens_ad(pattern, expected):
    assert format(AD, pattern) == expected


def test_tokens_bs():
    d = NepaliDate(2082, 2, 20)
    assert format(d, "yyyy/M/d") == "2082/3/20"
    assert format_iso(d) == "2082-03-20"
    assert format_long(d) == "Ashadh 20th, 2082"
    assert format_short(d) == "03/20/2082"
    assert format_medium(d) == "Aash 20, 2082"


def test_substituted_values_are_not_rescanned():
    assert format(date(2025, 5, 1), "MMMM") == "May"
    assert format(NepaliDate(2080, 9, 1), "MMMM yyyy") == "Magh 2080"
    assert format(date(2025, 3, 9), "MMMM d") == "March 9"


@pytest.mark.parametrize(
    "n,expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
     (13, "13th"), (21, "21st"), (22, "22nd"), (23, "23rd"), (30, "30th"),
     (101, "101st"), (111, "111th"), (112, "112th")],
)
def test_ordinal(n, expected):
    assert ordinal(n) == expected


def test_nepali_locale():
    assert format(NepaliDate(2082, 1, 5), "MMMM", locale="ne") == "जेठ"
    assert format(AD, "MMMM", locale="ne") == "जुन"
    assert format_long(NepaliDate(2080, 8, 16), locale="ne") == "पुस 16th, 2080"


def test_unknown_locale():
    with pytest.raises(KeyError):
        format(AD, "MMMM", locale="fr")


def test_names():
    assert month_name(0, "BS") == "Baisakh"
    assert month_name(11, "BS", "ne") == "चैत"
    assert short_month_name(8, "BS") == "Pous"
    assert short_month_name(11, "AD") == "Dec"
    assert weekday_name(0, "AD") == "Sunday"
    assert weekday_name(6, "BS") == "Shanibaar"
    with pytest.raises(KeyError):
        month_name(0, "XX")


def test_iso_round_trip():
    for bs in (NepaliDate(2000, 8, 17), NepaliDate(2081, 8, 9), NepaliDate(2090, 11, 30)):
        assert NepaliDate.from_string(format_iso(bs)) == bs
