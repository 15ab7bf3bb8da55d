"""Check vote eligibility use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from cardiac.domain.service import VotingService
from cardiac.domain.value import CoinId, UserId


class CheckVoteRequest(BaseModel):
    """Check vote request."""

    user_id: str
    coin_id: str


class CheckVoteResponse(BaseModel):
    """Whether the user may vote for the coin right now."""

    coin_id: str
    can_vote: bool
    remaining_ms: int | None = None
    last_vote_time: datetime | None = None


class CheckVoteUseCase:
    """Use case for reading vote eligibility. Never writes."""

    def __init__(self, voting_service: VotingService) -> None:
        self.voting_service = voting_service

    async def execute(self, request: CheckVoteRequest) -> CheckVoteResponse:
        eligibility = await self.voting_service.can_vote(
            UserId(UUID(request.user_id)), CoinId(request.coin_id)
        )
        return CheckVoteResponse(
            coin_id=request.coin_id,
            can_vote=eligibility.eligible,
            remaining_ms=eligibility.remaining_ms,
            last_vote_time=eligibility.last_voted_at,
        )
