"""Calendar units: day-of-week designation."""

from __future__ import annotations

from calendate.units.weekday import Weekday

__all__: list[str] = ["Weekday"]
