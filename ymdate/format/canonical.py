"""Canonical YYYY-MM-DD encoding and decoding.

This module is the only place where date strings are read or written.
The canonical form is exactly 10 ASCII characters: a zero-padded
4-digit year, a dash, a 2-digit month, a dash, and a 2-digit day.

Functions:
    matches_canonical: Check the fixed pattern without validating fields.
    decompose: Split a canonical string into a YMD triple.
    compose: Build a canonical string from a YMD-like value.

Neither decompose nor compose checks the calendar: "2023-02-31" is a
well-formed string that decodes to YMD(2023, 2, 31). Use
ymdate.core.validity or CalendarDate when a real date is required.

Examples:
    >>> decompose("2024-01-15")
    YMD(year=2024, month=1, day=15)

    >>> compose(YMD(2024, 1, 15))
    '2024-01-15'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from ymdate._internal.constants import (
    CANONICAL_LENGTH,
    CANONICAL_PATTERN,
    DAY_WIDTH,
    MONTH_WIDTH,
    YEAR_WIDTH,
)
from ymdate.errors import MalformedDateString, ValidationError


class YMD(NamedTuple):
    """A decoded (year, month, day) triple.

    Not calendar-validated; see CalendarDate for the validated type.
    """

    year: int
    month: int
    day: int


def matches_canonical(value: object) -> bool:
    """Return True if value is a str of the form YYYY-MM-DD.

    Only the shape is checked. Field ranges are not.

    Examples:
        >>> matches_canonical("2024-13-45")
        True
        >>> matches_canonical("2024-1-5")
        False
        >>> matches_canonical(20240115)
        False
    """
    if not isinstance(value, str) or len(value) != CANONICAL_LENGTH:
        return False
    return CANONICAL_PATTERN.fullmatch(value) is not None


def decompose(s: str) -> YMD:
    """Extract year, month and day from a canonical date string.

    Fields are read by fixed position: characters 0-3, 5-6 and 8-9.

    Args:
        s: The string to decode.

    Returns:
        The decoded YMD triple.

    Raises:
        MalformedDateString: If s is not a string of the YYYY-MM-DD form.

    Examples:
        >>> decompose("0001-02-03")
        YMD(year=1, month=2, day=3)

        >>> decompose("2024/01/15")
        Traceback (most recent call last):
        ...
        MalformedDateString: Invalid date string: '2024/01/15'. Expected YYYY-MM-DD
    """
    if not matches_canonical(s):
        raise MalformedDateString(s)
    return YMD(int(s[0:4]), int(s[5:7]), int(s[8:10]))


def _fields_of(value: Any) -> tuple[Any, Any, Any]:
    if isinstance(value, Mapping):
        try:
            return value["year"], value["month"], value["day"]
        except KeyError as e:
            raise TypeError(f"missing date field {e.args[0]!r}") from None
    try:
        return value.year, value.month, value.day
    except AttributeError:
        raise TypeError(
            f"expected YMD, CalendarDate or mapping, got {type(value).__name__}"
        ) from None


def _pad(name: str, n: int, digits: int) -> str:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0 or n >= 10**digits:
        raise ValidationError(f"{name} must fit in {digits} digits, got {n}")
    return str(n).zfill(digits)


def compose(value: Any) -> str:
    """Build the canonical string for a year/month/day value.

    Accepts a YMD, a CalendarDate, any object with year/month/day
    attributes, or a mapping with "year", "month" and "day" keys.

    No calendar validation is performed: an out-of-range triple such as
    YMD(2023, 2, 31) gives a well-formed but invalid date string.

    Args:
        value: The fields to encode.

    Returns:
        The YYYY-MM-DD string.

    Raises:
        TypeError: If value does not provide integer year/month/day fields.
        ValidationError: If a field is negative or too wide for its width.

    Examples:
        >>> compose({"year": 2024, "month": 3, "day": 9})
        '2024-03-09'

        >>> compose(YMD(2023, 2, 31))
        '2023-02-31'
    """
    year, month, day = _fields_of(value)
    return (
        f"{_pad('year', year, YEAR_WIDTH)}"
        f"-{_pad('month', month, MONTH_WIDTH)}"
        f"-{_pad('day', day, DAY_WIDTH)}"
    )


__all__ = [
    "YMD",
    "matches_canonical",
    "decompose",
    "compose",
]
