"""Conversions between canonical date strings and datetime values.

This module is the boundary between ymdate's whole-day strings and
Python's datetime objects. Time of day only exists on this side of the
boundary; the core never sees it.

Functions:
    from_local_datetime: Date of a datetime as seen in local time.
    from_utc_datetime: Date of a datetime as seen in UTC.
    to_local_datetime: Aware local datetime at a date and time of day.
    to_utc_datetime: Aware UTC datetime at a date and time of day.

Examples:
    >>> from datetime import datetime, timezone
    >>> from_utc_datetime(datetime(2024, 1, 15, 23, 30, tzinfo=timezone.utc))
    '2024-01-15'

    >>> to_utc_datetime("2024-01-15", TimeOfDay(hour=12))
    datetime.datetime(2024, 1, 15, 12, 0, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations

import datetime as _dt
import math
from typing import Optional, Union

from ymdate.core.date import CalendarDate
from ymdate.errors import ValidationError
from ymdate.format.canonical import YMD, compose

DateLike = Union[_dt.datetime, _dt.date]


class TimeOfDay:
    """Optional hour, minute, second and millisecond parts.

    Absent parts count as zero. If second is given without millisecond,
    second may be fractional; its fraction is truncated to whole
    milliseconds. Values past their nominal range roll over into the
    next unit (hour=25 is 1am the following day).

    Examples:
        >>> TimeOfDay(second=1.25).to_timedelta()
        datetime.timedelta(seconds=1, microseconds=250000)
    """

    __slots__ = ("_hour", "_minute", "_second", "_millisecond")

    def __init__(
        self,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[float] = None,
        millisecond: Optional[int] = None,
    ) -> None:
        self._hour = hour
        self._minute = minute
        self._second = second
        self._millisecond = millisecond

    @property
    def hour(self) -> Optional[int]:
        return self._hour

    @property
    def minute(self) -> Optional[int]:
        return self._minute

    @property
    def second(self) -> Optional[float]:
        return self._second

    @property
    def millisecond(self) -> Optional[int]:
        return self._millisecond

    def to_timedelta(self) -> _dt.timedelta:
        """Return the offset from midnight as a timedelta."""
        seconds = self._second or 0
        millis = self._millisecond
        if self._second is not None and millis is None:
            whole = math.trunc(seconds)
            millis = math.trunc((seconds - whole) * 1000)
            seconds = whole
        return _dt.timedelta(
            hours=self._hour or 0,
            minutes=self._minute or 0,
            seconds=math.trunc(seconds),
            milliseconds=millis or 0,
        )

    def __repr__(self) -> str:
        return (
            f"TimeOfDay(hour={self._hour}, minute={self._minute}, "
            f"second={self._second}, millisecond={self._millisecond})"
        )


# Local offsets are looked up two days inside the datetime limits
_LOCAL_ZONE_MIN = _dt.datetime(1, 1, 3)
_LOCAL_ZONE_MAX = _dt.datetime(9999, 12, 29)


def _wall_clock(s: str, time: Optional[TimeOfDay]) -> _dt.datetime:
    date = CalendarDate.from_string(s)
    midnight = _dt.datetime(date.year, date.month, date.day)
    if time is None:
        return midnight
    try:
        return midnight + time.to_timedelta()
    except OverflowError:
        raise ValidationError(
            f"time of day {time!r} moves {s} outside years 1-9999"
        ) from None


def _local_zone(wall: _dt.datetime) -> _dt.tzinfo:
    """Return the local zone in effect at a naive local wall time."""
    nearest = min(max(wall, _LOCAL_ZONE_MIN), _LOCAL_ZONE_MAX)
    zone = nearest.astimezone().tzinfo
    assert zone is not None
    return zone


def from_local_datetime(d: DateLike) -> str:
    """Return the local calendar date of d as a canonical string.

    Aware datetimes are converted to the local timezone first. Naive
    datetimes and plain dates are taken to be local already.

    Args:
        d: A datetime or date.

    Returns:
        The YYYY-MM-DD string.
    """
    if isinstance(d, _dt.datetime) and d.tzinfo is not None:
        d = d.astimezone()
    return compose(YMD(d.year, d.month, d.day))


def from_utc_datetime(d: DateLike) -> str:
    """Return the UTC calendar date of d as a canonical string.

    Aware datetimes are converted to UTC first. Naive datetimes and
    plain dates are taken to be UTC already.

    Args:
        d: A datetime or date.

    Returns:
        The YYYY-MM-DD string.
    """
    if isinstance(d, _dt.datetime) and d.tzinfo is not None:
        d = d.astimezone(_dt.timezone.utc)
    return compose(YMD(d.year, d.month, d.day))


def to_local_datetime(s: str, time: Optional[TimeOfDay] = None) -> _dt.datetime:
    """Return an aware datetime at date s and the given local wall time.

    Args:
        s: A canonical date string.
        time: Optional time of day; midnight if omitted.

    Returns:
        A datetime carrying the local timezone.

    Raises:
        MalformedDateString: If s is not of the YYYY-MM-DD form.
        ValidationError: If s does not name a real date,
            or the time of day moves it outside years 1-9999.
    """
    wall = _wall_clock(s, time)
    return wall.replace(tzinfo=_local_zone(wall))


def to_utc_datetime(s: str, time: Optional[TimeOfDay] = None) -> _dt.datetime:
    """Return an aware UTC datetime at date s and the given time of day.

    Args:
        s: A canonical date string.
        time: Optional time of day; midnight if omitted.

    Returns:
        A datetime with tzinfo=timezone.utc.

    Raises:
        MalformedDateString: If s is not of the YYYY-MM-DD form.
        ValidationError: If s does not name a real date,
            or the time of day moves it outside years 1-9999.
    """
    return _wall_clock(s, time).replace(tzinfo=_dt.timezone.utc)


__all__ = [
    "TimeOfDay",
    "from_local_datetime",
    "from_utc_datetime",
    "to_local_datetime",
    "to_utc_datetime",
]
