"""Dotted DD.MM.YYYY formatting and parsing.

Format:
    DD.MM.YYYY  day and month zero-padded to two digits, year unpadded

    15.01.2024
    01.01.1
    29.02.12024

Parsing accepts three integers separated by literal dots. Whitespace may
precede each number or dot, and trailing whitespace is ignored.
Calendar validity is not checked here; that is CalendarDate's job.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from calendate._internal.constants import TEXT_SEPARATOR
from calendate.errors import FormatError

if TYPE_CHECKING:
    from calendate.core.date import CalendarDate


_NUMBER = r"\s*([+-]?\d+)\s*"
_SEP = re.escape(TEXT_SEPARATOR)
_DOTTED_PATTERN = re.compile(_NUMBER + _SEP + _NUMBER + _SEP + _NUMBER, re.ASCII)


def format_dotted(day: int, month: int, year: int) -> str:
    """Format date components as DD.MM.YYYY.

    Examples:
        >>> format_dotted(5, 3, 2024)
        '05.03.2024'
        >>> format_dotted(1, 1, 1)
        '01.01.1'
    """
    return f"{day:02d}{TEXT_SEPARATOR}{month:02d}{TEXT_SEPARATOR}{year}"


def split_dotted(text: str) -> tuple[int, int, int]:
    """Extract (day, month, year) tokens from DD.MM.YYYY text.

    Args:
        text: The string to parse.

    Returns:
        Tuple of (day, month, year). The values are not validated.

    Raises:
        FormatError: If text is not three integers joined by dots.

    Examples:
        >>> split_dotted("15.01.2024")
        (15, 1, 2024)
        >>> split_dotted("31.02.2023")  # tokens only, no calendar check
        (31, 2, 2023)
    """
    if not isinstance(text, str):
        raise FormatError(f"expected str, got {type(text).__name__}")

    match = _DOTTED_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(
            f"Invalid date format: {text!r}. Expected DD.MM.YYYY"
        )

    try:
        day, month, year = (int(group) for group in match.groups())
    except ValueError as e:
        raise FormatError(
            f"Invalid date format: number too long in {text[:40]!r}..."
        ) from e
    return (day, month, year)


def format_date(value: CalendarDate) -> str:
    """Format a CalendarDate as DD.MM.YYYY.

    Raises:
        TypeError: If value is not a CalendarDate.
    """
    from calendate.core.date import CalendarDate

    if not isinstance(value, CalendarDate):
        raise TypeError(f"expected CalendarDate, got {type(value).__name__}")
    return format_dotted(value.day, value.month, value.year)


def parse_date(text: str) -> CalendarDate:
    """Parse DD.MM.YYYY text into a new CalendarDate.

    Raises:
        FormatError: If the text does not match DD.MM.YYYY.
        InvalidDateError: If the numbers do not form a calendar date.

    Examples:
        >>> parse_date("29.02.2024")
        CalendarDate(day=29, month=2, year=2024)
    """
    from calendate.core.date import CalendarDate

    day, month, year = split_dotted(text)
    return CalendarDate(day, month, year)


__all__ = [
    "format_dotted",
    "split_dotted",
    "format_date",
    "parse_date",
]
