"""Cast vote use case."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from cardiac.domain.error import ValidationError
from cardiac.domain.service import VotingService
from cardiac.domain.value import CoinId, UserId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_id: str  # From the verified session token
    coin_id: str
    coin_name: str


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    message: str = "Vote cast successfully"
    vote_id: str
    coin_id: str
    coin_name: str
    voted_at: datetime
    vote_day: date
    coin_total: int


class CastVoteUseCase:
    """Use case for voting for a coin."""

    def __init__(self, voting_service: VotingService) -> None:
        """Initialize cast vote use case.

        Args:
            voting_service: Voting domain service
        """
        self.voting_service = voting_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute the vote.

        Raises:
            ValidationError: If coin id or name is blank
            NotFoundError: If the voter's account no longer exists
            AlreadyVotedTodayError: If the user already voted today
        """
        coin_id = request.coin_id.strip()
        coin_name = request.coin_name.strip()
        if not coin_id or not coin_name:
            raise ValidationError("Coin ID and coin name are required")

        receipt = await self.voting_service.cast_vote(
            UserId(UUID(request.user_id)), CoinId(coin_id), coin_name
        )
        vote = receipt.vote

        return CastVoteResponse(
            vote_id=str(vote.id),
            coin_id=vote.coin_id,
            coin_name=vote.coin_name,
            voted_at=vote.created_at,
            vote_day=vote.vote_day,
            coin_total=receipt.coin_total,
        )
