"""
Token based date formatting for ``datetime.date`` and ``NepaliDate``.

Tokens:
  yyyy  full year              2082
  yy    last two year digits   82
  MMMM  month name             Jestha / June
  MMM   month abbreviation     Jest / Jun
  MM    2-digit month          02
  M     month                  2
  dd    2-digit day            03
  d     day                    3
  do    ordinal day            3rd
"""

from __future__ import annotations

import re
from datetime import date
from typing import Dict, Union

from .locale import month_name, short_month_name
from .nepali_date import NepaliDate

DateLike = Union[date, NepaliDate]

# Longest first so that MMMM wins over MMM, MM and M.
_TOKEN_RE = re.compile(r"yyyy|MMMM|MMM|yy|MM|dd|do|M|d")


def ordinal(n: int) -> str:
    if n % 10 == 1 and n % 100 != 11:
        return f"{n}st"
    if n % 10 == 2 and n % 100 != 12:
        return f"{n}nd"
    if n % 10 == 3 and n % 100 != 13:
        return f"{n}rd"
    return f"{n}th"


def _fields(d: DateLike, locale: str) -> Dict[str, str]:
    if isinstance(d, NepaliDate):
        year, month, day, calendar = d.year, d.month, d.day, "BS"
    else:
        year, month, day, calendar = d.year, d.month - 1, d.day, "AD"
    return {
        "yyyy": str(year),
        "yy": str(year)[-2:],
        "MMMM": month_name(month, calendar, locale),
        "MMM": short_month_name(month, calendar, locale),
        "MM": f"{month + 1:02d}",
        "M": str(month + 1),
        "dd": f"{day:02d}",
        "d": str(day),
        "do": ordinal(day),
    }


def format(d: DateLike, pattern: str, *, locale: str = "en") -> str:
    """
    Render ``d`` with the tokens above; other characters are copied through.

    Substitution is a single scan of ``pattern``, so digits or letters coming
    from a substituted value are never matched as tokens.
    """
    fields = _fields(d, locale)
    return _TOKEN_RE.sub(lambda m: fields[m.group(0)], pattern)


def format_iso(d: DateLike) -> str:
    return format(d, "yyyy-MM-dd")


def format_long(d: DateLike, *, locale: str = "en") -> str:
    return format(d, "MMMM do, yyyy", locale=locale)


def format_short(d: DateLike) -> str:
    return format(d, "MM/dd/yyyy")


def format_medium(d: DateLike, *, locale: str = "en") -> str:
    return format(d, "MMM dd, yyyy", locale=locale)
