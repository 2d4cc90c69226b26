"""
calnep.engines.specs
--------------------
Named calendar specifications assembled from the static tables.
"""

from __future__ import annotations

from typing import Dict

from calnep.core.types import CalendarId, CalendarSpec
from calnep.engines import tables as T

NEPAL_BS = CalendarSpec(
    id=CalendarId(family="bikram-sambat", name="nepal-bs", version="2000-2090"),
    bs_months=T.BS_MONTHS,
    min_ad_year=T.MIN_AD_YEAR,
    max_ad_year=T.MAX_AD_YEAR,
    first_bs=(T.FIRST_BS_MONTH, T.FIRST_BS_DAY),
    anchor_bs=(T.ANCHOR_BS_MONTH, T.ANCHOR_BS_DAY),
    bs_correction=T.BS_DAY_CORRECTION,
    ad_correction=T.AD_DAY_CORRECTION,
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    NEPAL_BS.id.name: NEPAL_BS,
}
