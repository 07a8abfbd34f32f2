"""Textual formatting and parsing.

This module converts CalendarDate values to and from the DD.MM.YYYY
representation.

Functions:
    format_date: Format a CalendarDate as DD.MM.YYYY.
    parse_date: Parse DD.MM.YYYY into a new CalendarDate.

Examples:
    >>> from calendate.format import parse_date, format_date
    >>> d = parse_date("05.03.2024")
    >>> format_date(d)
    '05.03.2024'
"""

from __future__ import annotations

from calendate.format.dotted import format_date, parse_date

__all__: list[str] = [
    "format_date",
    "parse_date",
]
