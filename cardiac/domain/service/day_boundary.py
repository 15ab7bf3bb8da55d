"""Reference-timezone day boundary.

Every daily rule (one vote per coin, one share award per coin) resets at
00:00 in a single fixed timezone so all users share the same reset instant,
wherever they are.
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cardiac.util.clock import Clock
from cardiac.util.error import ConfigurationError

from .base import Service


class DayBoundary(Service):
    """Computes "today" and the time left until the next reset."""

    def __init__(self, clock: Clock, reference_timezone: str = "America/New_York"):
        """Initialize day boundary.

        Args:
            clock: Source of the current instant
            reference_timezone: IANA timezone name defining the calendar day

        Raises:
            ConfigurationError: If the timezone name is unknown
        """
        self.clock = clock
        try:
            self.timezone = ZoneInfo(reference_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(
                f"Unknown reference timezone: {reference_timezone}"
            ) from e

    def now(self) -> datetime:
        """Current instant, aware, in UTC."""
        return self.clock.now().astimezone(timezone.utc)

    def today(self) -> date:
        """Current calendar date in the reference timezone."""
        return self.calendar_date_of(self.now())

    def calendar_date_of(self, instant: datetime, tz: tzinfo | None = None) -> date:
        """Project an instant onto a calendar.

        Uses the zone's real UTC offset at that instant, so dates are right on
        both sides of a daylight-saving transition.

        Args:
            instant: The instant; naive values are read as UTC
            tz: Calendar to project onto (defaults to the reference timezone)

        Returns:
            The calendar date of the instant in that timezone
        """
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(tz or self.timezone).date()

    def next_midnight(self) -> datetime:
        """The next 00:00 reference-time boundary, as a UTC instant."""
        tomorrow = self.today() + timedelta(days=1)
        local_midnight = datetime.combine(tomorrow, time.min, tzinfo=self.timezone)
        return local_midnight.astimezone(timezone.utc)

    def time_until_next_midnight(self) -> timedelta:
        """Non-negative time left before the daily reset."""
        # Both operands are UTC, so DST days measure 23h or 25h correctly
        return max(self.next_midnight() - self.now(), timedelta(0))

    def ms_until_next_midnight(self) -> int:
        """Milliseconds left before the daily reset."""
        return int(self.time_until_next_midnight().total_seconds() * 1000)
