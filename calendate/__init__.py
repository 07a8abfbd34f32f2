"""Calendate: a small calendar date value type.

Calendate provides a validated, mutable Gregorian date with day
arithmetic, comparisons, day-of-week and week-number lookups, and a
DD.MM.YYYY text form.

Core Types:
    CalendarDate: Calendar date (day, month, year), year >= 1
    InstanceCounter: Creation/liveness tally used by CalendarDate

Units:
    Weekday: Day of the week (MONDAY=0 .. SUNDAY=6)

Calendar Functions:
    is_leap_year: Gregorian leap-year rule
    days_in_month: Length of a month in a given year

Format Functions:
    parse_date: Parse DD.MM.YYYY into a CalendarDate
    format_date: Format a CalendarDate as DD.MM.YYYY

Exceptions:
    CalendateError: Base exception
    InvalidDateError: Not a valid calendar date
    FormatError: Text does not match the expected layout

Example:
    >>> from calendate import CalendarDate
    >>> d = CalendarDate(31, 12, 2023)
    >>> d.add_days(1)
    >>> str(d)
    '01.01.2024'
    >>> d - CalendarDate(25, 12, 2023)
    7
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from calendate.core.counter import InstanceCounter
from calendate.core.date import CalendarDate

# Units
from calendate.units.weekday import Weekday

# Calendar functions
from calendate._internal.calendar import days_in_month, is_leap_year

# Exceptions
from calendate.errors import (
    CalendateError,
    FormatError,
    InvalidDateError,
)

# Format functions
from calendate.format import format_date, parse_date

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "InstanceCounter",
    # Units
    "Weekday",
    # Calendar functions
    "is_leap_year",
    "days_in_month",
    # Exceptions
    "CalendateError",
    "InvalidDateError",
    "FormatError",
    # Format functions
    "parse_date",
    "format_date",
]
