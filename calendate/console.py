"""Console hooks for reading and printing dates.

A console line holds three whitespace-separated integers in the order
``day month year``. Dates are printed as DD.MM.YYYY, one per line.

These hooks only move values between a text stream and CalendarDate.
Reporting errors to the user and choosing an exit status is left to the
caller.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from calendate.core.date import CalendarDate
from calendate.errors import FormatError

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Enter date (dd mm yyyy): "


def _read_fields(stream: TextIO, prompt: str | None, out: TextIO) -> tuple[int, int, int]:
    if prompt:
        out.write(prompt)
        out.flush()

    line = stream.readline()
    if not line:
        raise FormatError("no input: expected 'day month year'")

    tokens = line.split()
    if len(tokens) != 3:
        raise FormatError(
            f"expected three numbers 'day month year', got {line.strip()!r}"
        )
    try:
        day, month, year = (int(token) for token in tokens)
    except ValueError as e:
        raise FormatError(
            f"expected three numbers 'day month year', got {line.strip()!r}"
        ) from e

    logger.debug("read date fields day=%d month=%d year=%d", day, month, year)
    return (day, month, year)


def input_date(
    date: CalendarDate,
    stream: TextIO | None = None,
    prompt: str | None = DEFAULT_PROMPT,
    out: TextIO | None = None,
) -> None:
    """Read ``day month year`` from a stream into an existing date.

    Args:
        date: The date to overwrite.
        stream: Where to read from (defaults to stdin).
        prompt: Text written before reading, or None for no prompt.
        out: Where the prompt goes (defaults to stdout).

    Raises:
        FormatError: If the line is missing or not three integers.
        InvalidDateError: If the numbers do not form a valid date; the
            date is left unchanged.
    """
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    day, month, year = _read_fields(stream, prompt, out)
    date.set_date(day, month, year)


def read_date(
    stream: TextIO | None = None,
    prompt: str | None = None,
    out: TextIO | None = None,
) -> CalendarDate:
    """Read ``day month year`` from a stream into a new CalendarDate.

    Raises:
        FormatError: If the line is missing or not three integers.
        InvalidDateError: If the numbers do not form a valid date.

    Examples:
        >>> import io
        >>> read_date(io.StringIO("15 1 2024\\n"))
        CalendarDate(day=15, month=1, year=2024)
    """
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    day, month, year = _read_fields(stream, prompt, out)
    return CalendarDate(day, month, year)


def print_date(date: CalendarDate, stream: TextIO | None = None) -> None:
    """Write a date as a DD.MM.YYYY line.

    Args:
        date: The date to print.
        stream: Where to write (defaults to stdout).
    """
    stream = stream if stream is not None else sys.stdout
    stream.write(date.format() + "\n")


__all__ = [
    "DEFAULT_PROMPT",
    "input_date",
    "read_date",
    "print_date",
]
