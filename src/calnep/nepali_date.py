"""
calnep.nepali_date
------------------
``NepaliDate``: a Bikram Sambat calendar date that is always normalized.

Months are 0-based (Baisakh = 0 .. Chaitra = 11) and days 1-based, so
``NepaliDate(2080, 0, 4)`` is 4 Baisakh 2080. Out-of-range months and days
carry into neighbouring months and years; a year that leaves the month-length
table raises :class:`~calnep.core.errors.InvalidBSYear`.
"""

from __future__ import annotations

import functools
import re
from datetime import date, datetime
from functools import partial
from typing import Tuple

from .core.errors import InvalidDateStringFormat, InvalidMonthRange
from .core.types import CalendarSpec
from .engines.daycount import bs_days_since_epoch, carry
from .engines.validators import bs_month_length

_DATE_STRING_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def _converter():
    from . import api as _api
    return _api.get_converter()


def _spec() -> CalendarSpec:
    return _converter().spec


def _check_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _normalize(year: int, month: int, day: int) -> Tuple[int, int, int]:
    return carry(
        _check_int("year", year),
        _check_int("month", month),
        _check_int("day", day),
        partial(bs_month_length, spec=_spec()),
    )


@functools.total_ordering
class NepaliDate:
    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int = 0, day: int = 1):
        self._year, self._month, self._day = _normalize(year, month, day)

    # ---------------------------------------------------------
    # Alternate constructors
    # ---------------------------------------------------------

    @classmethod
    def from_ad(cls, d: date) -> "NepaliDate":
        """BS date for the AD ``date`` (or the date part of a ``datetime``)."""
        if isinstance(d, datetime):
            d = d.date()
        return cls(*_converter().ad_to_bs(d))

    @classmethod
    def from_string(cls, s: str) -> "NepaliDate":
        """
        Parse ``"YYYY-MM-DD"`` with a 1-based month. The day is normalized
        like any other input, so ``"2080-01-32"`` is 1 Jestha 2080.
        """
        m = _DATE_STRING_RE.fullmatch(s)
        if m is None:
            raise InvalidDateStringFormat(
                f"Invalid date string {s!r}. Expected format: YYYY-MM-DD with ASCII digits"
            )

        year, month, day = (int(p) for p in m.groups())
        if not 1 <= month <= 12:
            raise InvalidMonthRange(f"Month must be between 1 and 12, got {month}")
        return cls(year, month - 1, day)

    @classmethod
    def today(cls) -> "NepaliDate":
        return cls.from_ad(date.today())

    def clone(self) -> "NepaliDate":
        return NepaliDate(self._year, self._month, self._day)

    __copy__ = clone

    def __deepcopy__(self, memo) -> "NepaliDate":
        return self.clone()

    # ---------------------------------------------------------
    # Getters
    # ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        """0-based month."""
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def day_of_week(self) -> int:
        """
        Day of the week, 0=Sunday .. 6=Saturday, taken from the AD date.

        Not ``date.weekday()``, which counts from Monday.
        """
        return (self.to_ad().weekday() + 1) % 7

    def days_in_month(self) -> int:
        return bs_month_length(self._year, self._month, spec=_spec())

    def days_in_month_of(self, month: int) -> int:
        """Length of 0-based ``month`` in this date's year."""
        return bs_month_length(self._year, month, spec=_spec())

    def first_day_of_month(self) -> "NepaliDate":
        return NepaliDate(self._year, self._month, 1)

    def last_day_of_month(self) -> "NepaliDate":
        return NepaliDate(self._year, self._month, self.days_in_month())

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def days_since_epoch(self) -> int:
        return bs_days_since_epoch(self._year, self._month, self._day, spec=_spec())

    # ---------------------------------------------------------
    # Setters: normalize first, assign only on success
    # ---------------------------------------------------------

    def set_year(self, year: int) -> None:
        self._year, self._month, self._day = _normalize(year, self._month, self._day)

    def set_month(self, month: int) -> None:
        self._year, self._month, self._day = _normalize(self._year, month, self._day)

    def set_day(self, day: int) -> None:
        self._year, self._month, self._day = _normalize(self._year, self._month, day)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_days(self, days: int) -> "NepaliDate":
        return NepaliDate(self._year, self._month, self._day + _check_int("days", days))

    def add_months(self, months: int) -> "NepaliDate":
        return NepaliDate(self._year, self._month + _check_int("months", months), self._day)

    def add_years(self, years: int) -> "NepaliDate":
        return NepaliDate(self._year + _check_int("years", years), self._month, self._day)

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def compare(self, other: "NepaliDate") -> int:
        """-1, 0 or 1 by (year, month, day)."""
        a, b = self.to_tuple(), other.to_tuple()
        return (a > b) - (a < b)

    def equals(self, other: "NepaliDate") -> bool:
        return self.to_tuple() == other.to_tuple()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self.compare(other) < 0

    # Mutable through the setters.
    __hash__ = None  # type: ignore[assignment]

    # ---------------------------------------------------------
    # Conversion and rendering
    # ---------------------------------------------------------

    def to_ad(self) -> date:
        return _converter().bs_to_ad(self._year, self._month, self._day)

    def isoformat(self) -> str:
        """``YYYY-MM-DD`` with a 1-based month; accepted by ``from_string``."""
        return f"{self._year:04d}-{self._month + 1:02d}-{self._day:02d}"

    def __str__(self) -> str:
        return f"{self._year:04d}/{self._month + 1:02d}/{self._day:02d}"

    def __repr__(self) -> str:
        return f"NepaliDate({self._year}, {self._month}, {self._day})"

    def __format__(self, pattern: str) -> str:
        if not pattern:
            return str(self)
        from .format import format as _format
        return _format(self, pattern)
