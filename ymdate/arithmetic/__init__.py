"""Calendar arithmetic on dates.

This module provides the increment engine:
    - increment: shift a (year, month, day) triple by a DateDelta
    - shift_date: shift a CalendarDate, checking the year range
    - shift: shift a canonical date string

Examples:
    >>> from ymdate.arithmetic import shift
    >>> shift("2023-01-01", years=1, days=-1)
    '2023-12-31'
"""

from __future__ import annotations

from ymdate.arithmetic.increment import increment, shift, shift_date

__all__ = [
    "increment",
    "shift",
    "shift_date",
]
