"""Validation utilities for Calendate.

This module checks day, month and year values against the calendar and
raises InvalidDateError for anything out of range. Every rejection is
logged at WARNING level.

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from calendate._internal.calendar import days_in_month
from calendate._internal.constants import MIN_YEAR, MONTHS_PER_YEAR
from calendate.errors import InvalidDateError

logger = logging.getLogger(__name__)


def _reject(message: str) -> InvalidDateError:
    logger.warning("Invalid date input: %s", message)
    return InvalidDateError(message)


def validate_integer(name: str, value: object) -> None:
    """Validate that a component is a plain integer.

    Raises:
        TypeError: If value is not an int (bool is rejected too).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        InvalidDateError: If year is below MIN_YEAR.
    """
    if year < MIN_YEAR:
        raise _reject(f"year must be >= {MIN_YEAR}, got {year}")


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidDateError: If month is outside 1-12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise _reject(f"month must be between 1 and 12, got {month}")


def validate_day(day: int, month: int, year: int) -> None:
    """Validate that a day is valid for the given month and year.

    Month must already be known to be in range.

    Raises:
        InvalidDateError: If day is invalid for the month.
    """
    max_day = days_in_month(month, year)
    if day < 1 or day > max_day:
        raise _reject(
            f"day must be between 1 and {max_day} for {month:02d}.{year}, got {day}"
        )


def is_valid_date(day: object, month: object, year: object) -> bool:
    """Return True if (day, month, year) is a valid date.

    Unlike validate_date, nothing is raised or logged.
    """
    for value in (day, month, year):
        if isinstance(value, bool) or not isinstance(value, int):
            return False
    if year < MIN_YEAR or month < 1 or month > MONTHS_PER_YEAR:
        return False
    return 1 <= day <= days_in_month(month, year)


def validate_date(day: int, month: int, year: int) -> None:
    """Validate a full (day, month, year) triple.

    Args:
        day: The day to validate.
        month: The month to validate.
        year: The year to validate.

    Raises:
        TypeError: If any component is not an int.
        InvalidDateError: If the triple is not a calendar date.

    Examples:
        >>> validate_date(29, 2, 2024)
        >>> validate_date(29, 2, 2023)
        Traceback (most recent call last):
        ...
        InvalidDateError: day must be between 1 and 28 for 02.2023, got 29
    """
    validate_integer("day", day)
    validate_integer("month", month)
    validate_integer("year", year)

    validate_year(year)
    validate_month(month)
    validate_day(day, month, year)


__all__ = [
    "validate_integer",
    "is_valid_date",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
]
