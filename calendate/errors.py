"""Calendate exception hierarchy.

All Calendate-specific exceptions inherit from CalendateError.
"""

from __future__ import annotations


class CalendateError(Exception):
    """Base exception for all Calendate errors."""

    pass


class InvalidDateError(CalendateError):
    """A (day, month, year) triple is not a valid calendar date.

    Raised by construction, by the field setters, by text parsing and by
    arithmetic that would leave the supported range.

    Examples:
        - Year below 1
        - Month value outside 1-12
        - Day 29 of February in a non-leap year
    """

    pass


class FormatError(CalendateError):
    """Text does not match the expected date layout.

    Examples:
        - Missing '.' separator ("15-01-2024")
        - Non-numeric token ("15.Jan.2024")
        - Fewer than three numbers on a console line
    """

    pass


__all__ = [
    "CalendateError",
    "InvalidDateError",
    "FormatError",
]
