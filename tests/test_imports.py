"""Tests for Calendate package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_calendate() -> None:
    """Import calendate package succeeds."""
    import calendate

    assert hasattr(calendate, "__version__")
    assert calendate.__version__ == "0.1.0"


def test_public_names_exported() -> None:
    """Every name in __all__ is reachable from the package."""
    import calendate

    for name in calendate.__all__:
        assert hasattr(calendate, name), name


def test_import_core_module() -> None:
    """Import calendate.core submodule succeeds."""
    from calendate import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import calendate.units submodule succeeds."""
    from calendate import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import calendate.format submodule succeeds."""
    from calendate import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_internal_module() -> None:
    """Import calendate._internal submodule succeeds."""
    from calendate import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import calendate.errors succeeds with all exception classes."""
    from calendate.errors import CalendateError, FormatError, InvalidDateError

    assert issubclass(InvalidDateError, CalendateError)
    assert issubclass(FormatError, CalendateError)
    assert issubclass(CalendateError, Exception)


def test_import_constants() -> None:
    """Import calendate._internal.constants succeeds."""
    from calendate._internal.constants import (
        DAYS_IN_MONTH,
        DEFAULT_DAY,
        DEFAULT_MONTH,
        DEFAULT_YEAR,
        MIN_YEAR,
    )

    assert (DEFAULT_DAY, DEFAULT_MONTH, DEFAULT_YEAR) == (1, 1, 2000)
    assert MIN_YEAR == 1
    assert len(DAYS_IN_MONTH) == 13  # 0-indexed placeholder + 12 months
    assert sum(DAYS_IN_MONTH) == 365
