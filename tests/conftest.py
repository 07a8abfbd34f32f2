"""Pytest configuration and fixtures for Calendate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so calendate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from calendate.core.counter import InstanceCounter  # noqa: E402
from calendate.core.date import CalendarDate  # noqa: E402


@pytest.fixture
def counter(monkeypatch: pytest.MonkeyPatch) -> InstanceCounter:
    """Install a fresh InstanceCounter on CalendarDate for one test."""
    fresh = InstanceCounter()
    monkeypatch.setattr(CalendarDate, "counter", fresh)
    return fresh
