"""Today, tomorrow and yesterday as canonical date strings.

Each helper takes an optional clock: a zero-argument callable returning
the current datetime. It defaults to datetime.now, so results follow
the local timezone.
"""

from __future__ import annotations

import datetime as _dt
from typing import Callable, Optional

from ymdate.arithmetic.increment import shift
from ymdate.convert.native import from_local_datetime

Clock = Callable[[], _dt.datetime]


def today(clock: Optional[Clock] = None) -> str:
    """Return today's local date.

    Examples:
        >>> from datetime import datetime
        >>> today(lambda: datetime(2024, 2, 28, 9, 0))
        '2024-02-28'
    """
    now = (clock or _dt.datetime.now)()
    return from_local_datetime(now)


def tomorrow(clock: Optional[Clock] = None) -> str:
    """Return tomorrow's local date."""
    return shift(today(clock), days=1)


def yesterday(clock: Optional[Clock] = None) -> str:
    """Return yesterday's local date."""
    return shift(today(clock), days=-1)


__all__ = ["Clock", "today", "tomorrow", "yesterday"]
