"""Month and weekday names for both calendars."""

from __future__ import annotations

from typing import Any, Dict, List, Literal

CalendarKind = Literal["AD", "BS"]

CALENDAR: Dict[str, Dict[str, Dict[str, List[str]]]] = {
    "en": {
        "BS": {
            "months": [
                "Baisakh", "Jestha", "Ashadh", "Shrawan", "Bhadra", "Ashwin",
                "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra",
            ],
            "days": [
                "Aaitabaar", "Sombaar", "Mangalbaar", "Budhabaar",
                "Bihibaar", "Shukrabaar", "Shanibaar",
            ],
        },
        "AD": {
            "months": [
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December",
            ],
            "days": [
                "Sunday", "Monday", "Tuesday", "Wednesday",
                "Thursday", "Friday", "Saturday",
            ],
        },
    },
    "ne": {
        "BS": {
            "months": [
                "बैशाख", "जेठ", "असार", "साउन", "भदौ", "असोज",
                "कात्तिक", "मंसिर", "पुस", "माघ", "फागुन", "चैत",
            ],
            "days": [
                "आइतबार", "सोमबार", "मंगलबार", "बुधबार",
                "बिहिबार", "शुक्रबार", "शनिबार",
            ],
        },
        "AD": {
            "months": [
                "जनवरी", "फेब्रुअरी", "मार्च", "अप्रिल", "मे", "जुन",
                "जुलाई", "अगस्ट", "सेप्टेम्बर", "अक्टोबर", "नोभेम्बर", "डिसेम्बर",
            ],
            "days": [
                "आइतबार", "सोमबार", "मंगलबार", "बुधबार",
                "बिहिबार", "शुक्रबार", "शनिबार",
            ],
        },
    },
}

# Fixed abbreviations for the MMM token. Devanagari names are short already.
MONTH_ABBREVIATIONS: Dict[str, Dict[str, List[str]]] = {
    "en": {
        "BS": ["Bais", "Jest", "Aash", "Shra", "Bhad", "Ashw",
               "Kart", "Mang", "Pous", "Magh", "Falg", "Chai"],
        "AD": ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    },
    "ne": {
        "BS": list(CALENDAR["ne"]["BS"]["months"]),
        "AD": list(CALENDAR["ne"]["AD"]["months"]),
    },
}


def _names(table: Dict[str, Any], locale: str, calendar: CalendarKind) -> Any:
    if locale not in table:
        raise KeyError(f"Unknown locale '{locale}'. Available: {sorted(table)}")
    if calendar not in ("AD", "BS"):
        raise KeyError(f"Unknown calendar '{calendar}'. Expected 'AD' or 'BS'")
    return table[locale][calendar]


def month_name(month: int, calendar: CalendarKind, locale: str = "en") -> str:
    """Full name of 0-based ``month``."""
    return _names(CALENDAR, locale, calendar)["months"][month]


def short_month_name(month: int, calendar: CalendarKind, locale: str = "en") -> str:
    return _names(MONTH_ABBREVIATIONS, locale, calendar)[month]


def weekday_name(weekday: int, calendar: CalendarKind, locale: str = "en") -> str:
    """Name of ``weekday`` counted from 0=Sunday."""
    return _names(CALENDAR, locale, calendar)["days"][weekday]
