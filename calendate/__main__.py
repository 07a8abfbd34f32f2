"""Interactive demonstration of CalendarDate.

Reads a date from stdin as ``day month year`` and walks through the main
operations: leap year check, day arithmetic, comparison, difference,
day of week, week number, text form and instance counts.

Usage:
    python -m calendate
    echo "15 1 2024" | python -m calendate --add 10 --subtract 3
    python -m calendate --compare 25.12.2023 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from calendate.console import input_date, print_date
from calendate.core.date import CalendarDate
from calendate.errors import CalendateError

logger = logging.getLogger("calendate")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calendate",
        description="Read a date and demonstrate calendar operations on it",
    )
    parser.add_argument(
        "--compare",
        default="01.01.2023",
        metavar="DD.MM.YYYY",
        help="second date to compare against (default: %(default)s)",
    )
    parser.add_argument(
        "--add", type=int, default=40, metavar="N", help="days to add (default: %(default)s)"
    )
    parser.add_argument(
        "--subtract",
        type=int,
        default=60,
        metavar="N",
        help="days to subtract afterwards (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    return parser


def run(
    args: argparse.Namespace,
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    """Run the demonstration, raising CalendateError on bad input."""
    date = CalendarDate()
    input_date(date, stream=stdin, out=stdout)

    stdout.write("Entered date: ")
    print_date(date, stdout)
    stdout.write(f"Leap year? {'Yes' if date.is_leap else 'No'}\n")

    date.add_days(args.add)
    stdout.write(f"Date after adding {args.add} days: ")
    print_date(date, stdout)

    date.subtract_days(args.subtract)
    stdout.write(f"Date after subtracting {args.subtract} days: ")
    print_date(date, stdout)

    other = CalendarDate.from_string(args.compare)
    stdout.write("Second date: ")
    print_date(other, stdout)

    stdout.write("Comparison:\n")
    if date == other:
        stdout.write("Dates are equal.\n")
    elif date < other:
        stdout.write("First date is earlier.\n")
    else:
        stdout.write("First date is later.\n")

    stdout.write(f"Difference in days: {date - other}\n")
    stdout.write(
        f"Day of week: {date.day_of_week()} ({date.weekday.display_name}, 0=Monday)\n"
    )
    stdout.write(f"Week number: {date.week_number()}\n")
    stdout.write(f"Date to string: {date.format()}\n")
    stdout.write(
        f"Total created: {CalendarDate.total_created()}, "
        f"Existing: {CalendarDate.alive_count()}\n"
    )


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Entry point. Returns the process exit status."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        run(args, stdin or sys.stdin, stdout or sys.stdout)
    except CalendateError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
