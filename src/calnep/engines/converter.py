"""
calnep.engines.converter
------------------------
The orchestrator. Reduces a date in one calendar to the shared day count and
rebuilds it in the other calendar.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Tuple

from calnep.core.errors import (
    InvalidADDateRange,
    InvalidBSDateRange,
    InvalidBSYear,
)
from calnep.core.types import CalendarSpec
from calnep.engines.daycount import (
    ad_date_from_days,
    ad_days_since_epoch,
    bs_date_from_days,
    bs_days_since_epoch,
)
from calnep.engines.validators import is_valid_ad_date, is_valid_bs_date

logger = logging.getLogger(__name__)

Triple = Tuple[int, int, int]


class CalendarConverter:
    """
    Converts between Bikram Sambat triples (0-based month) and
    ``datetime.date`` values for one calendar spec.
    """
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.id = spec.id

    # ---------------------------------------------------------
    # BS -> AD
    # ---------------------------------------------------------

    def bs_day_count(self, year: int, month: int, day: int) -> int:
        if not is_valid_bs_date(year, month, day, spec=self.spec):
            raise InvalidBSDateRange(
                f"BS date {year}/{month + 1:02d}/{day:02d} is outside the supported range"
            )
        return bs_days_since_epoch(year, month, day, spec=self.spec)

    def bs_to_ad(self, year: int, month: int, day: int) -> date:
        days = self.bs_day_count(year, month, day)
        logger.debug("bs_to_ad %d/%d/%d: %d days from anchor", year, month, day, days)
        y, m, d = ad_date_from_days(days, spec=self.spec)
        return date(y, m + 1, d)

    # ---------------------------------------------------------
    # AD -> BS
    # ---------------------------------------------------------

    def ad_day_count(self, d: date) -> int:
        if not is_valid_ad_date(d.year, d.month - 1, d.day, spec=self.spec):
            raise InvalidADDateRange(f"AD date {d.isoformat()} is outside the supported range")
        return ad_days_since_epoch(d.year, d.month - 1, d.day, spec=self.spec)

    def ad_to_bs(self, d: date) -> Triple:
        days = self.ad_day_count(d)
        logger.debug("ad_to_bs %s: %d days from anchor", d.isoformat(), days)
        try:
            return bs_date_from_days(days, spec=self.spec)
        except InvalidBSYear as exc:
            raise InvalidADDateRange(
                f"AD date {d.isoformat()} is past the end of the BS table ({self.spec.max_bs_year})"
            ) from exc

    # ---------------------------------------------------------
    # Introspection
    # ---------------------------------------------------------

    def supported_range(self) -> Dict[str, Any]:
        spec = self.spec
        first_bs = (spec.min_bs_year, *spec.first_bs)
        last_month = 11
        last_bs = (spec.max_bs_year, last_month, spec.bs_months[spec.max_bs_year][last_month])
        return {
            "first_bs": first_bs,
            "last_bs": last_bs,
            "first_ad": self.bs_to_ad(*first_bs),
            "last_ad": self.bs_to_ad(*last_bs),
        }

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "bs_years": (self.spec.min_bs_year, self.spec.max_bs_year),
            "ad_years": (self.spec.min_ad_year, self.spec.max_ad_year),
            "anchor_bs": (self.spec.min_bs_year, *self.spec.anchor_bs),
            "anchor_ad": self.spec.anchor_ad,
        }

    def explain(self, d: date) -> Dict[str, Any]:
        days = self.ad_day_count(d)
        bs = self.ad_to_bs(d)
        return {
            "ad": d,
            "ad_days_since_epoch": days,
            "bs": bs,
            "bs_days_since_epoch": bs_days_since_epoch(*bs, spec=self.spec),
        }
