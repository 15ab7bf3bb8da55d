"""Domain value objects."""

from cardiac.domain.value.identifiers import (
    CoinId,
    ShareLogId,
    UserId,
    VoteId,
)
from cardiac.domain.value.types import (
    GLOBAL_ELIGIBILITY_KEY,
    CoinMarketSnapshot,
    CoinTally,
    Email,
    VoteEligibility,
    VoteWindow,
    VotingScope,
)

__all__ = [
    # Identifiers
    "UserId",
    "VoteId",
    "ShareLogId",
    "CoinId",
    # Types
    "GLOBAL_ELIGIBILITY_KEY",
    "CoinMarketSnapshot",
    "CoinTally",
    "Email",
    "VoteEligibility",
    "VoteWindow",
    "VotingScope",
]
