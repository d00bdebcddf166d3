"""Boundary conversions for canonical date strings.

This module provides functions for converting date strings to and from
other representations:
    - datetime values, in local time or UTC
    - the current wall-clock date (today, tomorrow, yesterday)

Examples:
    >>> from datetime import datetime
    >>> from ymdate.convert import from_local_datetime, to_utc_datetime

    >>> from_local_datetime(datetime(2024, 1, 15, 14, 30))
    '2024-01-15'
    >>> to_utc_datetime("2024-01-15").day
    15
"""

from __future__ import annotations

from ymdate.convert.clock import Clock, today, tomorrow, yesterday
from ymdate.convert.native import (
    TimeOfDay,
    from_local_datetime,
    from_utc_datetime,
    to_local_datetime,
    to_utc_datetime,
)

__all__ = [
    # datetime
    "TimeOfDay",
    "from_local_datetime",
    "from_utc_datetime",
    "to_local_datetime",
    "to_utc_datetime",
    # clock
    "Clock",
    "today",
    "tomorrow",
    "yesterday",
]
