"""Core types.

This module provides:
    - CalendarDate: Mutable calendar date in the proleptic Gregorian calendar
    - InstanceCounter: Thread-safe creation/liveness tally
"""

from __future__ import annotations

from calendate.core.counter import InstanceCounter
from calendate.core.date import CalendarDate, default_counter

__all__: list[str] = [
    "CalendarDate",
    "InstanceCounter",
    "default_counter",
]
