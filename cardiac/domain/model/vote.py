"""Vote entity.

A vote is an immutable ledger event: a user backed a coin at an instant.
The ledger is append-only and is the source of truth for eligibility and for
every leaderboard count.
"""

from datetime import date, datetime

from cardiac.domain.model.common import DomainModel
from cardiac.domain.value import CoinId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (user, eligibility_key) per reference-timezone day
      (enforced by a database unique constraint on
      user_id, eligibility_key, vote_day)
    - Never updated or deleted by the application
    """

    id: VoteId
    user_id: UserId
    coin_id: CoinId
    coin_name: str
    created_at: datetime  # UTC
    vote_day: date  # Reference-timezone calendar date of created_at
    eligibility_key: str  # coin_id (per-coin scope) or "*" (global scope)
