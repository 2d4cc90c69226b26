class CalnepError(Exception):
    """Base error."""

class InvalidBSYear(CalnepError, ValueError):
    """Raised when a BS year falls outside the month-length table."""

class InvalidADYear(CalnepError, ValueError):
    """Raised when an AD year falls outside the supported span."""

class InvalidBSDateRange(CalnepError, ValueError):
    """Raised when a full BS date cannot be converted."""

class InvalidADDateRange(CalnepError, ValueError):
    """Raised when a full AD date cannot be converted."""

class InvalidDateStringFormat(CalnepError, ValueError):
    """Raised when a date string is not YYYY-MM-DD with numeric parts."""

class InvalidMonthRange(CalnepError, ValueError):
    """Raised when a month number is outside its calendar's range."""
