from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Literal, Optional, Sequence, Tuple, Union

from .core.types import CalendarSpec, DayInfo
from .engines.converter import CalendarConverter
from .engines.factory import make_converter as _make_converter
from .engines.validators import ad_month_length, bs_month_length
from .nepali_date import NepaliDate, _check_int

DateLike = Union[date, NepaliDate]
BSLike = Union[NepaliDate, Sequence[int]]

_converter: Optional[CalendarConverter] = None

def set_converter(conv: CalendarConverter) -> None:
    global _converter
    _converter = conv

def get_converter() -> CalendarConverter:
    if _converter is None:
        raise RuntimeError("Calendar converter not initialized")
    return _converter

def make_converter(spec: CalendarSpec) -> CalendarConverter:
    return _make_converter(spec)

def _as_date(d: date) -> date:
    return d.date() if isinstance(d, datetime) else d

def _as_triple(bs: BSLike) -> Tuple[int, int, int]:
    if isinstance(bs, NepaliDate):
        return bs.to_tuple()
    year, month, day = bs
    return _check_int("year", year), _check_int("month", month), _check_int("day", day)

# ============================================================
# Conversion
# ============================================================

def ad_to_bs(d: date) -> NepaliDate:
    """AD -> BS. Raises InvalidADDateRange outside the supported span."""
    return NepaliDate(*get_converter().ad_to_bs(_as_date(d)))

def bs_to_ad(bs: BSLike) -> date:
    """BS -> AD for a NepaliDate or a (year, 0-based month, day) triple.

    Raises InvalidBSDateRange outside the table or before the first
    representable date.
    """
    return get_converter().bs_to_ad(*_as_triple(bs))

def day_info(d: date, *, debug: bool = False) -> DayInfo:
    conv = get_converter()
    d = _as_date(d)
    nepali = ad_to_bs(d)
    return DayInfo(
        civil_date=d,
        calendar=conv.id,
        nepali=nepali,
        weekday=(d.weekday() + 1) % 7,
        day_count=conv.ad_day_count(d),
        debug=conv.explain(d) if debug else None,
    )

def explain(d: date) -> Dict[str, Any]:
    return get_converter().explain(_as_date(d))

def calendar_info() -> Dict[str, Any]:
    return get_converter().info()

def supported_range() -> Dict[str, Any]:
    return get_converter().supported_range()

# ============================================================
# BS month helpers
# ============================================================

def days_in_month(year: int, month: int) -> int:
    """Length of BS ``month`` (0-based) in ``year``."""
    return bs_month_length(year, month, spec=get_converter().spec)

def month_bounds(year: int, month: int, *, as_date: bool = True) -> dict:
    first = NepaliDate(year, month, 1)
    last = first.last_day_of_month()
    out = {"year": year, "month": month, "days": last.day, "first": first, "last": last}
    if as_date:
        out["first_date"] = first.to_ad()
        out["last_date"] = last.to_ad()
    return out

def first_day_of_month(year: int, month: int) -> date:
    return month_bounds(year, month)["first_date"]

def last_day_of_month(year: int, month: int) -> date:
    return month_bounds(year, month)["last_date"]

def new_year_day(year: int) -> date:
    """AD date of 1 Baisakh ``year``."""
    return NepaliDate(year, 0, 1).to_ad()

def today() -> NepaliDate:
    return NepaliDate.today()

# ============================================================
# Calendar-aware month helpers
# ============================================================

CalendarKind = Literal["AD", "BS"]

def _in_calendar(d: DateLike, calendar: CalendarKind) -> DateLike:
    if calendar == "AD":
        return d.to_ad() if isinstance(d, NepaliDate) else _as_date(d)
    if calendar == "BS":
        return d if isinstance(d, NepaliDate) else ad_to_bs(d)
    raise ValueError(f"calendar must be 'AD' or 'BS', got {calendar!r}")

def total_days_in_month(d: DateLike, calendar: CalendarKind = "BS") -> int:
    """Length of the month containing ``d``, counted in ``calendar``."""
    x = _in_calendar(d, calendar)
    if isinstance(x, NepaliDate):
        return x.days_in_month()
    return ad_month_length(x.year, x.month - 1, spec=get_converter().spec)

def starting_weekday_of_month(d: DateLike, calendar: CalendarKind = "BS") -> int:
    """Weekday (0=Sunday) of the first day of ``d``'s month in ``calendar``."""
    x = _in_calendar(d, calendar)
    if isinstance(x, NepaliDate):
        return x.first_day_of_month().day_of_week()
    return (x.replace(day=1).weekday() + 1) % 7

def ending_weekday_of_month(d: DateLike, calendar: CalendarKind = "BS") -> int:
    x = _in_calendar(d, calendar)
    if isinstance(x, NepaliDate):
        return x.last_day_of_month().day_of_week()
    last = x.replace(day=total_days_in_month(x, "AD"))
    return (last.weekday() + 1) % 7

# ============================================================
# Mixed-type comparison
# ============================================================

def compare_dates(a: DateLike, b: DateLike) -> int:
    """-1, 0 or 1. Mixed BS/AD pairs are compared through their AD dates."""
    if isinstance(a, NepaliDate) and isinstance(b, NepaliDate):
        return a.compare(b)
    x = a.to_ad() if isinstance(a, NepaliDate) else _as_date(a)
    y = b.to_ad() if isinstance(b, NepaliDate) else _as_date(b)
    return (x > y) - (x < y)

def are_dates_equal(a: DateLike, b: DateLike) -> bool:
    return compare_dates(a, b) == 0

def is_date_before(a: DateLike, b: DateLike) -> bool:
    return compare_dates(a, b) < 0

def is_date_after(a: DateLike, b: DateLike) -> bool:
    return compare_dates(a, b) > 0

def is_date_between(d: DateLike, start: DateLike, end: DateLike) -> bool:
    """Inclusive on both ends."""
    return compare_dates(d, start) >= 0 and compare_dates(d, end) <= 0

def is_invalid_date_range(min_date: DateLike, max_date: DateLike) -> bool:
    return compare_dates(min_date, max_date) > 0
