"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

import re
from datetime import datetime, timedelta
from enum import Enum

from pydantic import field_validator

from cardiac.domain.value.common import RootValueObject, ValueObject
from cardiac.domain.value.identifiers import CoinId

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Eligibility key shared by every coin when voting is restricted globally
GLOBAL_ELIGIBILITY_KEY = "*"


class Email(RootValueObject[str]):
    """Account email, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if len(v) > 255 or not _EMAIL_PATTERN.match(v):
            raise ValueError("Email must be a valid address of at most 255 characters")
        return v


class VotingScope(str, Enum):
    """How far a single daily vote reaches."""

    PER_COIN = "per_coin"
    GLOBAL = "global"

    def eligibility_key(self, coin_id: CoinId) -> str:
        """Key under which a vote counts against the daily limit."""
        if self is VotingScope.GLOBAL:
            return GLOBAL_ELIGIBILITY_KEY
        return coin_id


class VoteWindow(str, Enum):
    """Time filters for vote tallies.

    TODAY is aligned to the reference-timezone calendar day so it matches the
    voting reset. The LAST_* windows are rolling windows anchored at now.
    """

    ALL_TIME = "all_time"
    TODAY = "today"
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_90_DAYS = "90d"

    @property
    def rolling_span(self) -> timedelta | None:
        return _ROLLING_SPANS.get(self)


_ROLLING_SPANS = {
    VoteWindow.LAST_24_HOURS: timedelta(hours=24),
    VoteWindow.LAST_7_DAYS: timedelta(days=7),
    VoteWindow.LAST_90_DAYS: timedelta(days=90),
}


class VoteEligibility(ValueObject):
    """Answer to "may this user vote for this coin now?"."""

    eligible: bool
    remaining: timedelta | None = None
    last_voted_at: datetime | None = None

    @property
    def remaining_ms(self) -> int | None:
        if self.remaining is None:
            return None
        return max(0, int(self.remaining.total_seconds() * 1000))


class CoinTally(ValueObject):
    """Vote count for one coin within a window."""

    coin_id: CoinId
    coin_name: str
    count: int


class CoinMarketSnapshot(ValueObject):
    """The few market fields merged onto a user's voting history."""

    image: str | None = None
    current_price: float | None = None
    symbol: str | None = None
