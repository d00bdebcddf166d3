"""Calendar rules for ymdate.

This module provides the leap year rule and the month length table
that the rest of the library is built on. All functions use the
proleptic Gregorian calendar.

The public names are re-exported from the top-level ymdate package.
"""

from __future__ import annotations

from ymdate._internal.constants import DAYS_IN_MONTH
from ymdate._internal.validation import validate_month, validate_year


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    The rule is applied to any integer; callers that need a meaningful
    calendar year must check the range themselves.

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def max_day_in_month(month: int, year: int) -> int:
    """Return the last valid day (28, 29, 30 or 31) of a month.

    Note the argument order: month first, then year.

    Args:
        month: The month (1-12).
        year: The year (1-9999), needed for February in leap years.

    Returns:
        Number of days in the month.

    Raises:
        InvalidMonth: If month is not in 1-12.
        InvalidYear: If year is not in 1-9999.

    Examples:
        >>> max_day_in_month(2, 2024)
        29
        >>> max_day_in_month(2, 2023)
        28
        >>> max_day_in_month(4, 2023)
        30
    """
    validate_month(month)
    validate_year(year)

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return the number of days in a year.

    Args:
        year: The year to check.

    Returns:
        366 for leap years, 365 otherwise.
    """
    return 366 if is_leap_year(year) else 365


__all__ = [
    "is_leap_year",
    "max_day_in_month",
    "days_in_year",
]
