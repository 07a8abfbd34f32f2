"""Weekday enumeration.

This module provides the Weekday enum, numbered Monday=0 through
Sunday=6 to match CalendarDate.day_of_week().
"""

from __future__ import annotations

from enum import IntEnum

from calendate._internal.constants import WEEKDAY_NAMES


class Weekday(IntEnum):
    """Day of the week, Monday=0 through Sunday=6.

    Examples:
        >>> Weekday(0)
        <Weekday.MONDAY: 0>
        >>> Weekday.SUNDAY.is_weekend
        True
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= Weekday.SATURDAY

    @property
    def display_name(self) -> str:
        """Return the capitalized English name, e.g. 'Monday'."""
        return WEEKDAY_NAMES[self.value]


__all__ = ["Weekday"]
