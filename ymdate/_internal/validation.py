"""Validation utilities for ymdate.

This module provides the raising validators used when constructing
calendar values and deltas. The boolean predicates built on top of
them live in ymdate.core.validity.

This module is not part of the public API.
"""

from __future__ import annotations

import math
from typing import Any

from ymdate._internal.constants import MAX_MONTH, MAX_YEAR, MIN_MONTH, MIN_YEAR
from ymdate.errors import InvalidDay, InvalidMonth, InvalidYear, NonIntegerDelta


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        InvalidYear: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidYear(year)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        InvalidMonth: If month is outside 1-12.
    """
    if month < MIN_MONTH or month > MAX_MONTH:
        raise InvalidMonth(month)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidMonth: If month is outside 1-12.
        InvalidYear: If year is outside the supported range.
        InvalidDay: If day is invalid for the month.
    """
    from ymdate._internal.calendar import max_day_in_month

    max_day = max_day_in_month(month, year)
    if day < 1 or day > max_day:
        raise InvalidDay(year, month, day, max_day)


def require_integer(field: str, value: Any) -> int:
    """Return value as an exact int, or raise NonIntegerDelta.

    Integral floats (e.g. 2.0) are accepted and converted. Booleans,
    fractional or non-finite floats, and non-numeric values are rejected.

    Args:
        field: Name of the delta field, used in the error message.
        value: The value to check.

    Returns:
        The value as an int.

    Raises:
        NonIntegerDelta: If value is not an exact integer.

    Examples:
        >>> require_integer("days", 3)
        3
        >>> require_integer("days", -2.0)
        -2
        >>> require_integer("days", 1.5)
        Traceback (most recent call last):
        ...
        NonIntegerDelta: days increment must be an integer value, got 1.5
    """
    if isinstance(value, bool):
        raise NonIntegerDelta(field, value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise NonIntegerDelta(field, value)


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "require_integer",
]
