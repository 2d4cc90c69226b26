from __future__ import annotations
from calnep.engines.converter import CalendarConverter
from calnep.engines.specs import NEPAL_BS
from calnep.engines.factory import make_converter

def build_converter() -> CalendarConverter:
    return make_converter(NEPAL_BS)
