"""Mock clock provider for testing."""

from datetime import datetime, timezone

from dishka import Scope, provide

from cardiac.util.clock import Clock, FixedClock
from cardiac.util.di.infrastructure.clock import ClockProvider

# Noon in New York on a plain winter weekday
DEFAULT_TEST_INSTANT = datetime(2025, 1, 15, 17, 0, tzinfo=timezone.utc)


class MockClockProvider(ClockProvider):
    """Mock clock provider: a FixedClock shared by the whole container.

    Tests resolve ``Clock`` and call ``set``/``advance`` on it to move time.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide a fixed clock."""
        return FixedClock(DEFAULT_TEST_INSTANT)
