"""
calnep.engines.daycount
-----------------------
Day-count arithmetic. Each calendar maps a (year, month, day) triple to an
integer number of days since the shared anchor (2000 Magh 18 BS, 1944-01-31
AD), and back.

The inverse direction and BS date normalization are the same operation: carry
an out-of-range day across month boundaries using the calendar's month
lengths. ``carry`` implements it once for both calendars.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Tuple

from calnep.core.types import CalendarSpec
from calnep.engines.specs import NEPAL_BS
from calnep.engines.validators import (
    ad_month_length,
    ad_year_length,
    bs_month_length,
    bs_year_length,
)

Triple = Tuple[int, int, int]
MonthLength = Callable[[int, int], int]


def carry(year: int, month: int, day: int, month_length: MonthLength) -> Triple:
    """
    Normalize (year, month, day) so that 0 <= month <= 11 and
    1 <= day <= month_length(year, month).

    Overflowing months roll into years first; days are then carried one month
    at a time in either direction. ``month_length`` raises for unsupported
    years, so the walk fails as soon as it leaves the calendar.
    """
    dy, month = divmod(month, 12)
    year += dy

    length = month_length(year, month)
    while day < 1:
        month -= 1
        if month < 0:
            month = 11
            year -= 1
        length = month_length(year, month)
        day += length

    while day > length:
        day -= length
        month += 1
        if month > 11:
            month = 0
            year += 1
        length = month_length(year, month)

    return year, month, day


# ---------------------------------------------------------
# Bikram Sambat
# ---------------------------------------------------------

def bs_days_since_epoch(year: int, month: int, day: int, *, spec: CalendarSpec = NEPAL_BS) -> int:
    """Days from the anchor to a BS date (negative before the anchor)."""
    bs_month_length(year, month, spec=spec)  # validates year and month

    total = day
    for m in range(month):
        total += spec.bs_months[year][m]
    for y in range(spec.min_bs_year, year):
        total += bs_year_length(y, spec=spec)

    # Epoch-alignment constant: day sum of the anchor itself in the first
    # table year. Recompute if the table's first row changes.
    return total - spec.bs_correction


def bs_date_from_days(days: int, *, spec: CalendarSpec = NEPAL_BS) -> Triple:
    """Walk ``days`` from the BS anchor. Raises InvalidBSYear past the table."""
    month, day = spec.anchor_bs
    return carry(spec.min_bs_year, month, day + days, partial(bs_month_length, spec=spec))


# ---------------------------------------------------------
# Gregorian
# ---------------------------------------------------------

def ad_days_since_epoch(year: int, month: int, day: int, *, spec: CalendarSpec = NEPAL_BS) -> int:
    """Days from the anchor to an AD date given with a 0-based month."""
    ad_month_length(year, month, spec=spec)

    total = day
    for m in range(month):
        total += ad_month_length(year, m, spec=spec)
    for y in range(spec.min_ad_year, year):
        total += ad_year_length(y, spec=spec)

    # Epoch-alignment constant: the anchor is January 31 of MIN_AD_YEAR.
    return total - spec.ad_correction


def ad_date_from_days(days: int, *, spec: CalendarSpec = NEPAL_BS) -> Triple:
    """Walk ``days`` from the AD anchor; returns a 0-based month triple."""
    return carry(spec.min_ad_year, 0, spec.ad_correction + days, partial(ad_month_length, spec=spec))
