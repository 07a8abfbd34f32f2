"""Internal utilities for Calendate.

This module contains private implementation details:
    - Calendar math (leap years, month lengths, ordinals, rollover)
    - Validation helpers
    - Constants and lookup tables

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calendate._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_year",
]
