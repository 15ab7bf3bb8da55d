"""Unit tests for DayBoundary."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from cardiac.domain.service import DayBoundary
from cardiac.util.clock import FixedClock
from cardiac.util.error import ConfigurationError
from tests.conftest import ny


def boundary_at(instant: datetime) -> DayBoundary:
    return DayBoundary(clock=FixedClock(instant))


class TestCalendarDateOf:
    """Tests for projecting instants onto the New York calendar."""

    def test_late_evening_utc_is_still_previous_day_in_new_york(self):
        """04:59:59 UTC is 23:59:59 EST of the previous day."""
        boundary = boundary_at(datetime(2025, 1, 16, 12, tzinfo=timezone.utc))

        result = boundary.calendar_date_of(
            datetime(2025, 1, 16, 4, 59, 59, tzinfo=timezone.utc)
        )

        assert result == date(2025, 1, 15)

    def test_new_york_midnight_starts_new_day(self):
        """05:00:00 UTC is midnight EST."""
        boundary = boundary_at(datetime(2025, 1, 16, 12, tzinfo=timezone.utc))

        result = boundary.calendar_date_of(
            datetime(2025, 1, 16, 5, 0, 0, tzinfo=timezone.utc)
        )

        assert result == date(2025, 1, 16)

    def test_summer_uses_daylight_offset(self):
        """In July New York is UTC-4, so 03:59 UTC is the previous day."""
        boundary = boundary_at(datetime(2025, 7, 1, tzinfo=timezone.utc))

        assert boundary.calendar_date_of(
            datetime(2025, 7, 2, 3, 59, tzinfo=timezone.utc)
        ) == date(2025, 7, 1)
        assert boundary.calendar_date_of(
            datetime(2025, 7, 2, 4, 0, tzinfo=timezone.utc)
        ) == date(2025, 7, 2)

    def test_naive_instant_is_read_as_utc(self):
        boundary = boundary_at(datetime(2025, 1, 16, tzinfo=timezone.utc))

        assert boundary.calendar_date_of(datetime(2025, 1, 16, 4, 0)) == date(
            2025, 1, 15
        )

    def test_other_timezone_can_be_requested(self):
        """The same instant can fall on different dates in different zones."""
        boundary = boundary_at(datetime(2025, 1, 16, tzinfo=timezone.utc))
        instant = datetime(2025, 1, 15, 20, 0, tzinfo=timezone.utc)

        assert boundary.calendar_date_of(instant) == date(2025, 1, 15)
        assert boundary.calendar_date_of(
            instant, ZoneInfo("Asia/Tokyo")
        ) == date(2025, 1, 16)

    def test_today_follows_the_clock(self):
        clock = FixedClock(ny(2025, 1, 15, 23, 59, 59))
        boundary = DayBoundary(clock=clock)
        assert boundary.today() == date(2025, 1, 15)

        clock.advance(timedelta(seconds=2))

        assert boundary.today() == date(2025, 1, 16)


class TestTimeUntilNextMidnight:
    """Tests for the countdown to the daily reset."""

    def test_one_second_before_midnight(self):
        boundary = boundary_at(ny(2025, 1, 15, 23, 59, 59))

        assert boundary.time_until_next_midnight() == timedelta(seconds=1)
        assert boundary.ms_until_next_midnight() == 1000

    def test_exactly_at_midnight_is_a_full_day(self):
        boundary = boundary_at(ny(2025, 1, 15))

        assert boundary.time_until_next_midnight() == timedelta(hours=24)

    def test_next_midnight_is_reported_in_utc(self):
        boundary = boundary_at(ny(2025, 1, 15, 12))

        result = boundary.next_midnight()

        assert result == datetime(2025, 1, 16, 5, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_spring_forward_day_is_23_hours_long(self):
        """On 2025-03-09 New York skips 02:00-03:00."""
        boundary = boundary_at(ny(2025, 3, 9))

        assert boundary.time_until_next_midnight() == timedelta(hours=23)

    def test_fall_back_day_is_25_hours_long(self):
        """On 2025-11-02 New York repeats 01:00-02:00."""
        boundary = boundary_at(ny(2025, 11, 2))

        assert boundary.time_until_next_midnight() == timedelta(hours=25)

    def test_evening_after_spring_forward(self):
        """At 22:00 EDT on the transition day two hours remain."""
        boundary = boundary_at(ny(2025, 3, 9, 22))

        assert boundary.time_until_next_midnight() == timedelta(hours=2)


class TestConfiguration:
    """Tests for timezone configuration."""

    def test_unknown_timezone_raises_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Unknown reference timezone"):
            DayBoundary(clock=FixedClock(), reference_timezone="Mars/Olympus_Mons")

    def test_custom_reference_timezone(self):
        """Days can be aligned to another zone when configured."""
        boundary = DayBoundary(
            clock=FixedClock(datetime(2025, 1, 15, 23, 30, tzinfo=timezone.utc)),
            reference_timezone="UTC",
        )

        assert boundary.today() == date(2025, 1, 15)
        assert boundary.time_until_next_midnight() == timedelta(minutes=30)
