"""Internal constants for Calendate.

These constants define the limits, defaults and lookup tables used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Default date produced by CalendarDate() with no arguments
DEFAULT_DAY: int = 1
DEFAULT_MONTH: int = 1
DEFAULT_YEAR: int = 2000

# Year limits; there is no upper bound
MIN_YEAR: int = 1

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# A Gregorian 400-year cycle always holds the same number of days
DAYS_PER_400_YEARS: int = 146_097

# Textual representation: DD.MM.YYYY
TEXT_SEPARATOR: str = "."

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


__all__ = [
    "DEFAULT_DAY",
    "DEFAULT_MONTH",
    "DEFAULT_YEAR",
    "MIN_YEAR",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "DAYS_IN_MONTH",
    "DAYS_PER_400_YEARS",
    "TEXT_SEPARATOR",
    "WEEKDAY_NAMES",
]
