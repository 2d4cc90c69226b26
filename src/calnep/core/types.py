from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import TYPE_CHECKING, Any, Dict, Literal, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from ..nepali_date import NepaliDate

@dataclass(frozen=True)
class CalendarId:
    family: Literal["bikram-sambat", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a BS <-> AD converter.

    ``first_bs`` is the earliest representable (month, day) of the first table
    year. ``anchor_bs`` is the (month, day) of that year where both day counts
    are zero; the corrections shift raw day sums onto that anchor.
    """
    id: CalendarId
    bs_months: Mapping[int, Tuple[int, ...]]
    min_ad_year: int
    max_ad_year: int
    first_bs: Tuple[int, int]
    anchor_bs: Tuple[int, int]
    bs_correction: int
    ad_correction: int

    @property
    def min_bs_year(self) -> int:
        return min(self.bs_months)

    @property
    def max_bs_year(self) -> int:
        return max(self.bs_months)

    @property
    def anchor_ad(self) -> date:
        """AD date with day count zero: ``ad_correction`` days into MIN_AD_YEAR."""
        return date(self.min_ad_year, 1, 1) + timedelta(days=self.ad_correction - 1)

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    calendar: CalendarId
    nepali: "NepaliDate"
    weekday: int  # 0=Sunday .. 6=Saturday
    day_count: int
    debug: Optional[Dict[str, Any]] = None
