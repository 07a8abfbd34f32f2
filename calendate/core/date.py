"""CalendarDate class representing a mutable calendar date.

This module provides the CalendarDate class for representing calendar
dates in the proleptic Gregorian calendar, from 01.01.1 onwards.
"""

from __future__ import annotations

import weakref
from typing import ClassVar, Self

from calendate._internal.calendar import (
    day_of_week,
    days_before_month,
    days_in_month,
    is_leap_year,
    ordinal_to_ymd,
    shift_days,
    ymd_to_ordinal,
)
from calendate._internal.constants import (
    DAYS_PER_WEEK,
    DEFAULT_DAY,
    DEFAULT_MONTH,
    DEFAULT_YEAR,
)
from calendate._internal.validation import (
    is_valid_date,
    validate_date,
    validate_integer,
    validate_year,
)
from calendate.core.counter import InstanceCounter
from calendate.errors import InvalidDateError
from calendate.format.dotted import format_dotted, split_dotted
from calendate.units.weekday import Weekday

default_counter = InstanceCounter()


class CalendarDate:
    """A mutable calendar date in the proleptic Gregorian calendar.

    CalendarDate holds a day, month and year that always form a valid
    date. Every operation that changes the date either succeeds
    completely or raises and leaves the date as it was.

    Each successful construction or copy is recorded in ``counter``, and
    the alive count drops again once the instance is garbage collected.

    Attributes:
        day: The day of the month (1-31).
        month: The month (1-12).
        year: The year (>= 1).

    Examples:
        >>> d = CalendarDate(15, 1, 2024)
        >>> d.day, d.month, d.year
        (15, 1, 2024)

        >>> CalendarDate()
        CalendarDate(day=1, month=1, year=2000)

        >>> CalendarDate(29, 2, 2023)
        Traceback (most recent call last):
        ...
        InvalidDateError: day must be between 1 and 28 for 02.2023, got 29
    """

    __slots__ = ("_day", "_month", "_year", "__weakref__")

    counter: ClassVar[InstanceCounter] = default_counter

    def __init__(
        self,
        day: int = DEFAULT_DAY,
        month: int = DEFAULT_MONTH,
        year: int = DEFAULT_YEAR,
    ) -> None:
        """Create a CalendarDate from day, month and year.

        Args:
            day: The day of the month.
            month: The month (1-12).
            year: The year (>= 1).

        Raises:
            TypeError: If any component is not an int.
            InvalidDateError: If the components do not form a valid date.
        """
        validate_date(day, month, year)
        self._day = day
        self._month = month
        self._year = year
        self._track()

    def _track(self) -> None:
        counter = type(self).counter
        counter.register()
        weakref.finalize(self, counter.release)

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Create a CalendarDate from DD.MM.YYYY text.

        Raises:
            FormatError: If the text does not match DD.MM.YYYY.
            InvalidDateError: If the numbers do not form a valid date.

        Examples:
            >>> CalendarDate.from_string("05.03.2024")
            CalendarDate(day=5, month=3, year=2024)
        """
        day, month, year = split_dotted(text)
        return cls(day, month, year)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Self:
        """Create a CalendarDate from an absolute day number.

        Ordinal 1 is 01.01.1.

        Raises:
            InvalidDateError: If ordinal is below 1.

        Examples:
            >>> CalendarDate.from_ordinal(738886)
            CalendarDate(day=1, month=1, year=2024)
        """
        validate_integer("ordinal", ordinal)
        if ordinal < 1:
            raise InvalidDateError(f"ordinal must be >= 1, got {ordinal}")
        day, month, year = ordinal_to_ymd(ordinal)
        return cls(day, month, year)

    @classmethod
    def is_valid(cls, day: int, month: int, year: int) -> bool:
        """Return True if (day, month, year) is a valid date.

        Nothing is constructed, counted or logged.

        Examples:
            >>> CalendarDate.is_valid(29, 2, 2024)
            True
            >>> CalendarDate.is_valid(29, 2, 2023)
            False
        """
        return is_valid_date(day, month, year)

    @classmethod
    def total_created(cls) -> int:
        """Return how many instances have ever been created."""
        return cls.counter.total_created

    @classmethod
    def alive_count(cls) -> int:
        """Return how many instances are currently alive."""
        return cls.counter.alive

    def copy(self) -> Self:
        """Return an independent copy of this date.

        The copy is not re-validated; it is counted like any new instance.
        """
        clone = type(self).__new__(type(self))
        clone._day = self._day
        clone._month = self._month
        clone._year = self._year
        clone._track()
        return clone

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    # Field access

    @property
    def day(self) -> int:
        """The day of the month."""
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        self.set_day(value)

    @property
    def month(self) -> int:
        """The month (1-12)."""
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        self.set_month(value)

    @property
    def year(self) -> int:
        """The year (>= 1)."""
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self.set_year(value)

    def _assign(self, day: int, month: int, year: int) -> None:
        # Validate before touching any field so a failure changes nothing
        validate_date(day, month, year)
        self._day = day
        self._month = month
        self._year = year

    def set_date(self, day: int, month: int, year: int) -> None:
        """Replace all three fields at once.

        Raises:
            InvalidDateError: If the triple is not a valid date; the date
                is left unchanged.
        """
        self._assign(day, month, year)

    def set_day(self, day: int) -> None:
        """Replace the day.

        Raises:
            InvalidDateError: If the new day is invalid for the month;
                the date is left unchanged.

        Examples:
            >>> d = CalendarDate(15, 2, 2023)
            >>> d.set_day(30)
            Traceback (most recent call last):
            ...
            InvalidDateError: day must be between 1 and 28 for 02.2023, got 30
            >>> d
            CalendarDate(day=15, month=2, year=2023)
        """
        self._assign(day, self._month, self._year)

    def set_month(self, month: int) -> None:
        """Replace the month.

        Raises:
            InvalidDateError: If the month is out of range or the current
                day does not exist in it; the date is left unchanged.
        """
        self._assign(self._day, month, self._year)

    def set_year(self, year: int) -> None:
        """Replace the year.

        Raises:
            InvalidDateError: If the year is below 1, or the date is
                29 February and the new year is not a leap year.
        """
        self._assign(self._day, self._month, year)

    # Calendar properties

    @property
    def is_leap(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> CalendarDate(1, 1, 2024).is_leap
            True
            >>> CalendarDate(1, 1, 1900).is_leap
            False
        """
        return is_leap_year(self._year)

    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        return days_in_month(self._month, self._year)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        return days_before_month(self._month, self._year) + self._day

    def to_ordinal(self) -> int:
        """Return the absolute day number (01.01.1 is day 1)."""
        return ymd_to_ordinal(self._day, self._month, self._year)

    def day_of_week(self) -> int:
        """Return the day of the week (Monday=0, Sunday=6).

        Examples:
            >>> CalendarDate(1, 1, 2024).day_of_week()
            0
            >>> CalendarDate(25, 12, 2023).day_of_week()
            0
        """
        return day_of_week(self._day, self._month, self._year)

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week as a Weekday."""
        return Weekday(self.day_of_week())

    def week_number(self) -> int:
        """Return the sequential week of the year.

        Week 1 holds 1-7 January, week 2 holds 8-14 January, and so on.
        This is a plain 7-day count from January 1, not an ISO 8601 week.

        Examples:
            >>> CalendarDate(7, 1, 2024).week_number()
            1
            >>> CalendarDate(8, 1, 2024).week_number()
            2
            >>> CalendarDate(31, 12, 2024).week_number()
            53
        """
        first_of_year = ymd_to_ordinal(1, 1, self._year)
        return (self.to_ordinal() - first_of_year) // DAYS_PER_WEEK + 1

    # Arithmetic

    def add_days(self, days: int) -> None:
        """Move this date forward by ``days`` days in place.

        Excess days roll over into the following months and years. A
        negative count moves the date backwards.

        Raises:
            InvalidDateError: If the result would fall before 01.01.1;
                the date is left unchanged.

        Examples:
            >>> d = CalendarDate(31, 12, 2023)
            >>> d.add_days(1)
            >>> d
            CalendarDate(day=1, month=1, year=2024)
        """
        validate_integer("days", days)
        day, month, year = shift_days(self._day, self._month, self._year, days)
        validate_year(year)
        self._day = day
        self._month = month
        self._year = year

    def subtract_days(self, days: int) -> None:
        """Move this date backward by ``days`` days in place.

        Missing days are borrowed from the preceding months and years. A
        negative count moves the date forwards.

        Raises:
            InvalidDateError: If the result would fall before 01.01.1;
                the date is left unchanged.

        Examples:
            >>> d = CalendarDate(1, 1, 2024)
            >>> d.subtract_days(1)
            >>> d
            CalendarDate(day=31, month=12, year=2023)
        """
        validate_integer("days", days)
        self.add_days(-days)

    def increment(self) -> Self:
        """Advance one day in place and return self."""
        self.add_days(1)
        return self

    def decrement(self) -> Self:
        """Go back one day in place and return self."""
        self.subtract_days(1)
        return self

    def post_increment(self) -> Self:
        """Advance one day in place and return a copy of the previous date.

        Examples:
            >>> d = CalendarDate(31, 1, 2024)
            >>> d.post_increment()
            CalendarDate(day=31, month=1, year=2024)
            >>> d
            CalendarDate(day=1, month=2, year=2024)
        """
        previous = self.copy()
        self.add_days(1)
        return previous

    def post_decrement(self) -> Self:
        """Go back one day in place and return a copy of the previous date."""
        previous = self.copy()
        self.subtract_days(1)
        return previous

    # Text

    def format(self) -> str:
        """Return the date as DD.MM.YYYY.

        Examples:
            >>> CalendarDate(5, 3, 2024).format()
            '05.03.2024'
        """
        return format_dotted(self._day, self._month, self._year)

    def parse(self, text: str) -> None:
        """Replace this date with one read from DD.MM.YYYY text.

        Raises:
            FormatError: If the text does not match DD.MM.YYYY.
            InvalidDateError: If the numbers do not form a valid date;
                the date is left unchanged.
        """
        day, month, year = split_dotted(text)
        self._assign(day, month, year)

    # Operators

    @staticmethod
    def _is_day_count(value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    def __add__(self, other: object) -> Self:
        """Return a new date ``other`` days later.

        Examples:
            >>> CalendarDate(28, 2, 2024) + 1
            CalendarDate(day=29, month=2, year=2024)
        """
        if not self._is_day_count(other):
            return NotImplemented
        result = self.copy()
        result.add_days(other)
        return result

    __radd__ = __add__

    def __sub__(self, other: object) -> int | Self:
        """Subtract a day count or another date.

        When subtracting an int, returns a new CalendarDate.
        When subtracting a CalendarDate, returns the signed number of days
        between the two.

        Examples:
            >>> CalendarDate(1, 3, 2024) - CalendarDate(1, 2, 2024)
            29
            >>> CalendarDate(1, 3, 2024) - 1
            CalendarDate(day=29, month=2, year=2024)
        """
        if isinstance(other, CalendarDate):
            return self.to_ordinal() - other.to_ordinal()
        if not self._is_day_count(other):
            return NotImplemented
        result = self.copy()
        result.subtract_days(other)
        return result

    def __iadd__(self, other: object) -> Self:
        if not self._is_day_count(other):
            return NotImplemented
        self.add_days(other)
        return self

    def __isub__(self, other: object) -> Self:
        if not self._is_day_count(other):
            return NotImplemented
        self.subtract_days(other)
        return self

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> CalendarDate(15, 1, 2024) == CalendarDate(15, 1, 2024)
            True
        """
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() >= other._key()

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a string like 'CalendarDate(day=15, month=1, year=2024)'."""
        return (
            f"{type(self).__name__}(day={self._day}, "
            f"month={self._month}, year={self._year})"
        )

    def __str__(self) -> str:
        """Return the DD.MM.YYYY representation."""
        return self.format()


__all__ = ["CalendarDate", "default_counter"]
