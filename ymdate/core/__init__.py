"""Core ymdate value types and validity checks.

This module exports:
    - CalendarDate: validated (year, month, day)
    - DateDelta: optional years/months/days shift
    - YearRange: accepted-year window for validity checks
    - is_valid_date, is_valid_date_string: non-raising predicates
"""

from __future__ import annotations

from ymdate.core.date import CalendarDate
from ymdate.core.delta import DateDelta
from ymdate.core.validity import is_valid_date, is_valid_date_string
from ymdate.core.year_range import DEFAULT_YEAR_RANGE, YearRange

__all__: list[str] = [
    "CalendarDate",
    "DateDelta",
    "YearRange",
    "DEFAULT_YEAR_RANGE",
    "is_valid_date",
    "is_valid_date_string",
]
