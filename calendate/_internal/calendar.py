"""Calendar utilities for Calendate.

This module provides the pure functions behind CalendarDate: leap year
logic, month lengths, absolute day numbers (ordinals), day rollover and
the day-of-week formula.

Ordinal 1 = 0001-01-01 (January 1, year 1).

This module is not part of the public API.
"""

from __future__ import annotations

from calendate._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_400_YEARS,
    MONTHS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a given month.

    Args:
        month: The month (1-12).
        year: The year (needed for February in leap years).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(month: int, year: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(day: int, month: int, year: int) -> int:
    """Convert day, month, year to an absolute day number.

    The count is the day itself, plus the days of the earlier months of
    the year, plus 365 or 366 for every year from 1 up to (not including)
    ``year``. Completed years are summed in closed form.

    Args:
        day: The day (1-31).
        month: The month (1-12).
        year: The year (>= 1).

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(1, 1, 2024)
        738886
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(month, year) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an absolute day number to (day, month, year).

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (day, month, year).

    Raises:
        ValueError: If ordinal is below 1.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, DAYS_PER_400_YEARS)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # December 31 of a leap year closing a cycle
    if n1 == 4 or n100 == 4:
        return (31, 12, year - 1)

    month, day = _doy_to_md(year, n + 1)
    return (day, month, year)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert day-of-year to (month, day)."""
    for month in range(1, MONTHS_PER_YEAR + 1):
        dim = days_in_month(month, year)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def shift_days(day: int, month: int, year: int, delta: int) -> tuple[int, int, int]:
    """Move a date by ``delta`` days, rolling over months and years.

    Positive deltas carry excess days forward into the following months;
    negative deltas borrow days from the preceding months. Whole 400-year
    cycles are skipped up front so the month loop stays short.

    The result is not validated; the year may drop below 1.

    Args:
        day: Starting day (must be valid for month/year).
        month: Starting month (1-12).
        year: Starting year.
        delta: Signed number of days to move.

    Returns:
        Tuple of (day, month, year).

    Examples:
        >>> shift_days(31, 12, 2023, 1)
        (1, 1, 2024)
        >>> shift_days(1, 1, 2024, -1)
        (31, 12, 2023)
    """
    cycles = abs(delta) // DAYS_PER_400_YEARS
    if delta < 0:
        cycles = -cycles
    year += 400 * cycles
    day += delta - cycles * DAYS_PER_400_YEARS

    while day > days_in_month(month, year):
        day -= days_in_month(month, year)
        month += 1
        if month > MONTHS_PER_YEAR:
            month = 1
            year += 1

    while day < 1:
        month -= 1
        if month < 1:
            month = MONTHS_PER_YEAR
            year -= 1
        day += days_in_month(month, year)

    return (day, month, year)


def day_of_week(day: int, month: int, year: int) -> int:
    """Return the day of the week (Monday=0, Sunday=6).

    January and February are counted as months 13 and 14 of the previous
    year. The raw formula yields Sunday=0, which is shifted to Monday=0.

    Examples:
        >>> day_of_week(1, 1, 2024)
        0
        >>> day_of_week(7, 1, 2024)
        6
    """
    if month < 3:
        month += 12
        year -= 1
    w = (
        day
        + 2 * month
        + 3 * (month + 1) // 5
        + year
        + year // 4
        - year // 100
        + year // 400
        + 1
    ) % 7
    return (w + 6) % 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "shift_days",
    "day_of_week",
]
