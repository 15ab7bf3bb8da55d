"""Wall clock abstraction.

Everything that decides "today" asks a Clock instead of calling
datetime.now() directly, so the daily reset can be exercised at any instant.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""
        pass


class SystemClock(Clock):
    """Clock backed by the host's system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock frozen at a settable instant.

    Used by tests and by scripts that replay history.
    """

    def __init__(self, instant: datetime | None = None) -> None:
        self._instant = _as_utc(instant or datetime.now(timezone.utc))

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        """Move the clock to an absolute instant."""
        self._instant = _as_utc(instant)

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward (or backward with a negative delta)."""
        self._instant = self._instant + delta


def _as_utc(instant: datetime) -> datetime:
    # Naive values are taken to be UTC, the storage convention
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)
