"""Tests for ymdate package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import pytest


def test_import_ymdate() -> None:
    """Import ymdate package succeeds."""
    import ymdate

    assert hasattr(ymdate, "__version__")
    assert ymdate.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import ymdate.core submodule succeeds."""
    from ymdate import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import ymdate.format submodule succeeds."""
    from ymdate import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_arithmetic_module() -> None:
    """Import ymdate.arithmetic submodule succeeds."""
    from ymdate import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_convert_module() -> None:
    """Import ymdate.convert submodule succeeds."""
    from ymdate import convert

    assert hasattr(convert, "__all__")


def test_import_internal_module() -> None:
    """Import ymdate._internal submodule succeeds."""
    from ymdate import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_resolve() -> None:
    """Every name in ymdate.__all__ is an attribute of the package."""
    import ymdate

    for name in ymdate.__all__:
        assert hasattr(ymdate, name), name


def test_error_hierarchy() -> None:
    """Specific errors inherit from the two family bases."""
    from ymdate import errors

    assert issubclass(errors.MalformedDateString, errors.ParseError)
    for cls in (
        errors.InvalidYear,
        errors.InvalidMonth,
        errors.InvalidDay,
        errors.NonIntegerDelta,
    ):
        assert issubclass(cls, errors.ValidationError)
    assert issubclass(errors.ParseError, errors.YmdateError)
    assert issubclass(errors.ValidationError, errors.YmdateError)


def test_invalid_year_carries_year() -> None:
    """InvalidYear keeps the offending year and a fixed message."""
    from ymdate import errors

    error = errors.InvalidYear(10000)
    assert error.year == 10000
    assert str(error) == "year must be between 1 and 9999, got 10000"
    with pytest.raises(TypeError):
        errors.InvalidYear(0, "custom")  # type: ignore[call-arg]
