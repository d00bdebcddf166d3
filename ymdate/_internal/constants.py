"""Internal constants for ymdate.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

import re

# Year limits (4-digit year field)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

MIN_MONTH: int = 1
MAX_MONTH: int = 12
MONTHS_PER_YEAR: int = 12

# Upper bound on any day-of-month, before the month table is consulted
MAX_DAY: int = 31

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Canonical string: YYYY-MM-DD, ASCII digits only
CANONICAL_LENGTH: int = 10
YEAR_WIDTH: int = 4
MONTH_WIDTH: int = 2
DAY_WIDTH: int = 2
CANONICAL_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_MONTH",
    "MAX_MONTH",
    "MONTHS_PER_YEAR",
    "MAX_DAY",
    "DAYS_IN_MONTH",
    "CANONICAL_LENGTH",
    "YEAR_WIDTH",
    "MONTH_WIDTH",
    "DAY_WIDTH",
    "CANONICAL_PATTERN",
]
