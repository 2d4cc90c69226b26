"""calnep public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Install the process-wide converter on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    ad_to_bs,
    bs_to_ad,
    day_info,
    explain,
    calendar_info,
    supported_range,
    make_converter,
    days_in_month,
    month_bounds,
    first_day_of_month,
    last_day_of_month,
    new_year_day,
    today,
    total_days_in_month,
    starting_weekday_of_month,
    ending_weekday_of_month,
    compare_dates,
    are_dates_equal,
    is_date_before,
    is_date_after,
    is_date_between,
    is_invalid_date_range,
)
from .core.errors import (
    CalnepError,
    InvalidADDateRange,
    InvalidADYear,
    InvalidBSDateRange,
    InvalidBSYear,
    InvalidDateStringFormat,
    InvalidMonthRange,
)
from .engines.tables import (
    AD_MONTH,
    AD_MONTH_LEAP_YEAR,
    BS_MONTHS,
    MAX_AD_YEAR,
    MAX_BS_YEAR,
    MIN_AD_YEAR,
    MIN_BS_YEAR,
)
from .engines.validators import (
    is_ad_leap_year,
    is_valid_ad_date,
    is_valid_ad_year,
    is_valid_bs_date,
    is_valid_bs_year,
)
from .format import format, format_iso, format_long, format_medium, format_short, ordinal
from .locale import CALENDAR
from .nepali_date import NepaliDate

__all__ = [
    "ad_to_bs",
    "bs_to_ad",
    "day_info",
    "explain",
    "calendar_info",
    "supported_range",
    "make_converter",
    "days_in_month",
    "month_bounds",
    "first_day_of_month",
    "last_day_of_month",
    "new_year_day",
    "today",
    "total_days_in_month",
    "starting_weekday_of_month",
    "ending_weekday_of_month",
    "compare_dates",
    "are_dates_equal",
    "is_date_before",
    "is_date_after",
    "is_date_between",
    "is_invalid_date_range",
    "NepaliDate",
    "format",
    "format_iso",
    "format_long",
    "format_medium",
    "format_short",
    "ordinal",
    "CALENDAR",
    "is_ad_leap_year",
    "is_valid_ad_date",
    "is_valid_ad_year",
    "is_valid_bs_date",
    "is_valid_bs_year",
    "AD_MONTH",
    "AD_MONTH_LEAP_YEAR",
    "BS_MONTHS",
    "MAX_AD_YEAR",
    "MAX_BS_YEAR",
    "MIN_AD_YEAR",
    "MIN_BS_YEAR",
    "CalnepError",
    "InvalidADDateRange",
    "InvalidADYear",
    "InvalidBSDateRange",
    "InvalidBSYear",
    "InvalidDateStringFormat",
    "InvalidMonthRange",
]
