"""Tests for the console hooks and the demonstration driver."""

from __future__ import annotations

import io

import pytest

from calendate.__main__ import main
from calendate.console import DEFAULT_PROMPT, input_date, print_date, read_date
from calendate.core.date import CalendarDate
from calendate.errors import FormatError, InvalidDateError


class TestInputDate:
    """Tests for input_date."""

    def test_reads_into_existing_date(self) -> None:
        d = CalendarDate()
        out = io.StringIO()
        input_date(d, stream=io.StringIO("15 1 2024\n"), out=out)
        assert d.format() == "15.01.2024"
        assert out.getvalue() == DEFAULT_PROMPT

    def test_no_prompt(self) -> None:
        d = CalendarDate()
        out = io.StringIO()
        input_date(d, stream=io.StringIO("  3   4  2021 \n"), prompt=None, out=out)
        assert d.format() == "03.04.2021"
        assert out.getvalue() == ""

    def test_invalid_date_leaves_date_unchanged(self) -> None:
        d = CalendarDate(15, 1, 2024)
        with pytest.raises(InvalidDateError):
            input_date(d, stream=io.StringIO("29 2 2023\n"), out=io.StringIO())
        assert d.format() == "15.01.2024"

    def test_bad_line(self) -> None:
        d = CalendarDate()
        for line in ("15 1\n", "15 1 2024 7\n", "15.01.2024\n", "a b c\n"):
            with pytest.raises(FormatError):
                input_date(d, stream=io.StringIO(line), out=io.StringIO())
        assert d.format() == "01.01.2000"

    def test_end_of_input(self) -> None:
        with pytest.raises(FormatError, match="no input"):
            input_date(CalendarDate(), stream=io.StringIO(""), out=io.StringIO())


class TestReadAndPrint:
    """Tests for read_date and print_date."""

    def test_read_date(self) -> None:
        d = read_date(io.StringIO("31 12 2023\n"))
        assert d == CalendarDate(31, 12, 2023)

    def test_print_date(self) -> None:
        out = io.StringIO()
        print_date(CalendarDate(5, 3, 2024), out)
        assert out.getvalue() == "05.03.2024\n"


class TestMain:
    """Tests for the python -m calendate driver."""

    def test_demonstration(self) -> None:
        out = io.StringIO()
        status = main([], stdin=io.StringIO("15 1 2024\n"), stdout=out)
        text = out.getvalue()

        assert status == 0
        assert "Entered date: 15.01.2024\n" in text
        assert "Leap year? Yes\n" in text
        assert "Date after adding 40 days: 24.02.2024\n" in text
        assert "Date after subtracting 60 days: 26.12.2023\n" in text
        assert "Second date: 01.01.2023\n" in text
        assert "First date is later.\n" in text
        assert "Difference in days: 359\n" in text
        assert "Day of week: 1 (Tuesday, 0=Monday)\n" in text
        assert "Week number: 52\n" in text
        assert "Date to string: 26.12.2023\n" in text
        assert "Total created:" in text

    def test_options(self) -> None:
        out = io.StringIO()
        status = main(
            ["--add", "0", "--subtract", "0", "--compare", "15.01.2024"],
            stdin=io.StringIO("15 1 2024\n"),
            stdout=out,
        )
        assert status == 0
        assert "Dates are equal.\n" in out.getvalue()
        assert "Difference in days: 0\n" in out.getvalue()

    def test_invalid_input_exits_nonzero(self) -> None:
        status = main([], stdin=io.StringIO("31 2 2024\n"), stdout=io.StringIO())
        assert status == 1

    def test_malformed_input_exits_nonzero(self) -> None:
        status = main([], stdin=io.StringIO("hello\n"), stdout=io.StringIO())
        assert status == 1

    def test_oversized_compare_exits_nonzero(self) -> None:
        status = main(
            ["--compare", "01.01." + "1" * 5000],
            stdin=io.StringIO("15 1 2024\n"),
            stdout=io.StringIO(),
        )
        assert status == 1
