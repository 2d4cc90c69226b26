"""
calnep.engines.validators
-------------------------
Pure predicates and month-length lookups over primitive (year, month, day)
values. Months are 0-based in both calendars here.
"""

from __future__ import annotations

from calnep.core.errors import InvalidADYear, InvalidBSYear, InvalidMonthRange
from calnep.core.types import CalendarSpec
from calnep.engines.specs import NEPAL_BS
from calnep.engines.tables import AD_MONTH, AD_MONTH_LEAP_YEAR


def is_valid_bs_year(year: int, *, spec: CalendarSpec = NEPAL_BS) -> bool:
    return year in spec.bs_months


def is_valid_ad_year(year: int, *, spec: CalendarSpec = NEPAL_BS) -> bool:
    return spec.min_ad_year <= year <= spec.max_ad_year


def is_ad_leap_year(year: int) -> bool:
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise InvalidMonthRange(f"Month must be between 0 and 11, got {month}")


def bs_month_length(year: int, month: int, *, spec: CalendarSpec = NEPAL_BS) -> int:
    """Days in BS ``month`` (0-based) of ``year``, from the table."""
    if not is_valid_bs_year(year, spec=spec):
        raise InvalidBSYear(
            f"BS year {year} is outside the supported range "
            f"{spec.min_bs_year}-{spec.max_bs_year}"
        )
    _check_month(month)
    return spec.bs_months[year][month]


def ad_month_length(year: int, month: int, *, spec: CalendarSpec = NEPAL_BS) -> int:
    """Days in AD ``month`` (0-based) of ``year``, leap adjusted."""
    if not is_valid_ad_year(year, spec=spec):
        raise InvalidADYear(
            f"AD year {year} is outside the supported range "
            f"{spec.min_ad_year}-{spec.max_ad_year}"
        )
    _check_month(month)
    return AD_MONTH_LEAP_YEAR[month] if is_ad_leap_year(year) else AD_MONTH[month]


def bs_year_length(year: int, *, spec: CalendarSpec = NEPAL_BS) -> int:
    if not is_valid_bs_year(year, spec=spec):
        raise InvalidBSYear(
            f"BS year {year} is outside the supported range "
            f"{spec.min_bs_year}-{spec.max_bs_year}"
        )
    return sum(spec.bs_months[year])


def ad_year_length(year: int, *, spec: CalendarSpec = NEPAL_BS) -> int:
    if not is_valid_ad_year(year, spec=spec):
        raise InvalidADYear(
            f"AD year {year} is outside the supported range "
            f"{spec.min_ad_year}-{spec.max_ad_year}"
        )
    return 366 if is_ad_leap_year(year) else 365


def is_valid_ad_date(year: int, month: int, day: int, *, spec: CalendarSpec = NEPAL_BS) -> bool:
    if not 0 <= month <= 11:
        return False
    if not is_valid_ad_year(year, spec=spec):
        return False
    return 1 <= day <= ad_month_length(year, month, spec=spec)


def is_valid_bs_date(year: int, month: int, day: int, *, spec: CalendarSpec = NEPAL_BS) -> bool:
    """True if (year, month, day) lies inside the table.

    The first table year starts mid-year: everything before ``spec.first_bs``
    in ``spec.min_bs_year`` has no AD counterpart and is rejected.
    """
    if not 0 <= month <= 11:
        return False
    if not is_valid_bs_year(year, spec=spec):
        return False
    if not 1 <= day <= spec.bs_months[year][month]:
        return False
    if year == spec.min_bs_year and (month, day) < spec.first_bs:
        return False
    return True
