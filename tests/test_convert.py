"""Tests for the datetime and clock boundary adapters."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from ymdate.convert import (
    TimeOfDay,
    from_local_datetime,
    from_utc_datetime,
    to_local_datetime,
    to_utc_datetime,
    today,
    tomorrow,
    yesterday,
)
from ymdate.errors import InvalidDay, MalformedDateString, ValidationError


class TestFromDatetime:
    """Tests for from_local_datetime() and from_utc_datetime()."""

    def test_naive_local(self) -> None:
        """Test a naive datetime is read as local wall time."""
        assert from_local_datetime(datetime(2024, 1, 15, 23, 59)) == "2024-01-15"

    def test_uses_day_of_month_not_weekday(self) -> None:
        """Test the day field is the day of the month."""
        # 2024-01-15 is a Monday (weekday 0)
        assert from_local_datetime(datetime(2024, 1, 15)) == "2024-01-15"
        assert from_utc_datetime(datetime(2024, 1, 15)) == "2024-01-15"

    def test_plain_date(self) -> None:
        """Test a plain date is accepted."""
        assert from_local_datetime(date(1, 2, 3)) == "0001-02-03"
        assert from_utc_datetime(date(9999, 12, 31)) == "9999-12-31"

    def test_aware_to_utc(self) -> None:
        """Test an aware datetime is converted to UTC before reading fields."""
        plus_five = timezone(timedelta(hours=5))
        dt = datetime(2024, 3, 1, 2, 0, tzinfo=plus_five)
        assert from_utc_datetime(dt) == "2024-02-29"

    def test_aware_to_local(self) -> None:
        """Test an aware datetime is converted to local time."""
        dt = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
        assert from_local_datetime(dt) == dt.astimezone().date().isoformat()

    def test_naive_utc(self) -> None:
        """Test a naive datetime is read as UTC by from_utc_datetime."""
        assert from_utc_datetime(datetime(2024, 12, 31, 23, 0)) == "2024-12-31"


class TestTimeOfDay:
    """Tests for TimeOfDay."""

    def test_empty_is_midnight(self) -> None:
        """Test absent parts count as zero."""
        assert TimeOfDay().to_timedelta() == timedelta(0)

    def test_all_parts(self) -> None:
        """Test hour, minute, second and millisecond."""
        t = TimeOfDay(hour=14, minute=30, second=45, millisecond=123)
        assert t.to_timedelta() == timedelta(hours=14, minutes=30, seconds=45, milliseconds=123)

    def test_fractional_seconds(self) -> None:
        """Test fractional seconds become milliseconds when ms is absent."""
        assert TimeOfDay(second=1.25).to_timedelta() == timedelta(seconds=1, milliseconds=250)

    def test_fraction_ignored_with_milliseconds(self) -> None:
        """Test explicit milliseconds win over a fractional second."""
        assert TimeOfDay(second=1.75, millisecond=5).to_timedelta() == timedelta(
            seconds=1, milliseconds=5
        )

    def test_properties(self) -> None:
        """Test the parts are readable."""
        t = TimeOfDay(hour=1, minute=2)
        assert t.hour == 1
        assert t.minute == 2
        assert t.second is None
        assert t.millisecond is None


class TestToDatetime:
    """Tests for to_utc_datetime() and to_local_datetime()."""

    def test_utc_midnight(self) -> None:
        """Test a date without time is midnight UTC."""
        dt = to_utc_datetime("2024-01-15")
        assert dt == datetime(2024, 1, 15, tzinfo=timezone.utc)
        assert dt.tzinfo is timezone.utc

    def test_utc_with_time(self) -> None:
        """Test the time of day is applied."""
        dt = to_utc_datetime("2024-01-15", TimeOfDay(hour=14, minute=30, second=45.5))
        assert dt == datetime(2024, 1, 15, 14, 30, 45, 500000, tzinfo=timezone.utc)

    def test_hour_rolls_over(self) -> None:
        """Test out-of-range hours roll into the next day."""
        dt = to_utc_datetime("2024-02-28", TimeOfDay(hour=25))
        assert dt == datetime(2024, 2, 29, 1, tzinfo=timezone.utc)

    def test_local_wall_time(self) -> None:
        """Test the local result shows the requested wall time."""
        dt = to_local_datetime("2024-07-04", TimeOfDay(hour=9, minute=15))
        assert dt.tzinfo is not None
        assert (dt.year, dt.month, dt.day, dt.hour, dt.minute) == (2024, 7, 4, 9, 15)

    def test_round_trip(self) -> None:
        """Test a date survives conversion to a datetime and back."""
        assert from_utc_datetime(to_utc_datetime("2024-02-29")) == "2024-02-29"
        assert from_local_datetime(to_local_datetime("2024-02-29")) == "2024-02-29"

    def test_malformed(self) -> None:
        """Test a malformed string raises MalformedDateString."""
        with pytest.raises(MalformedDateString):
            to_utc_datetime("2024-2-29")

    def test_invalid_date(self) -> None:
        """Test a non-existent date raises InvalidDay."""
        with pytest.raises(InvalidDay):
            to_local_datetime("2023-02-29")

    @pytest.mark.parametrize("s", ["0001-01-01", "0001-01-02", "9999-12-30", "9999-12-31"])
    def test_local_at_supported_extremes(self, s: str) -> None:
        """Test the first and last supported dates convert to local datetimes."""
        dt = to_local_datetime(s)
        assert dt.tzinfo is not None
        assert dt.date().isoformat() == s
        assert (dt.hour, dt.minute) == (0, 0)

    def test_local_late_time_on_last_date(self) -> None:
        """Test a wall time late on 9999-12-31 keeps its fields."""
        dt = to_local_datetime("9999-12-31", TimeOfDay(hour=23, minute=59))
        assert (dt.year, dt.month, dt.day, dt.hour, dt.minute) == (9999, 12, 31, 23, 59)

    def test_time_past_last_date(self) -> None:
        """Test a time of day running past 9999-12-31 raises ValidationError."""
        with pytest.raises(ValidationError, match="outside years 1-9999"):
            to_utc_datetime("9999-12-31", TimeOfDay(hour=24))
        with pytest.raises(ValidationError, match="outside years 1-9999"):
            to_local_datetime("9999-12-31", TimeOfDay(hour=24))

    def test_time_before_first_date(self) -> None:
        """Test a negative time of day before 0001-01-01 raises ValidationError."""
        with pytest.raises(ValidationError, match="outside years 1-9999"):
            to_utc_datetime("0001-01-01", TimeOfDay(hour=-1))
        with pytest.raises(ValidationError, match="outside years 1-9999"):
            to_local_datetime("0001-01-01", TimeOfDay(minute=-1))


class TestClock:
    """Tests for today(), tomorrow() and yesterday()."""

    def test_today(self, fixed_clock) -> None:
        """Test today reads the clock's date."""
        assert today(fixed_clock(2024, 2, 28, 9, 0)) == "2024-02-28"

    def test_tomorrow(self, fixed_clock) -> None:
        """Test tomorrow crosses month and year ends."""
        assert tomorrow(fixed_clock(2024, 2, 28)) == "2024-02-29"
        assert tomorrow(fixed_clock(2023, 12, 31, 23, 59)) == "2024-01-01"

    def test_yesterday(self, fixed_clock) -> None:
        """Test yesterday crosses month and year starts."""
        assert yesterday(fixed_clock(2024, 3, 1)) == "2024-02-29"
        assert yesterday(fixed_clock(2024, 1, 1)) == "2023-12-31"

    def test_default_clock(self) -> None:
        """Test the default clock gives today's local date."""
        before = date.today().isoformat()
        result = today()
        after = date.today().isoformat()
        assert result in (before, after)
