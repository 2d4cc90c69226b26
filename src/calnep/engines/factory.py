"""
calnep.engines.factory
----------------------
Transforms pure data specifications into live converter objects.
"""

from __future__ import annotations
from calnep.core.types import CalendarSpec
from calnep.engines.converter import CalendarConverter


def make_converter(spec: CalendarSpec) -> CalendarConverter:
    """The universal entry point."""
    if not spec.bs_months:
        raise ValueError(f"Calendar '{spec.id.name}' has an empty month table")
    for year, row in spec.bs_months.items():
        if len(row) != 12:
            raise ValueError(f"BS year {year} has {len(row)} months, expected 12")
    return CalendarConverter(spec)
