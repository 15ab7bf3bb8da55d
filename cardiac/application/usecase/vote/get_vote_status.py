"""Get today's vote status use case."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from cardiac.domain.service import DayBoundary, VotingService
from cardiac.domain.value import UserId


class GetVoteStatusRequest(BaseModel):
    """Vote status request."""

    user_id: str


class VotedCoin(BaseModel):
    """A coin the user already voted for today."""

    coin_id: str
    voted_at: datetime


class GetVoteStatusResponse(BaseModel):
    """Coins voted for on the current reference day."""

    today: date
    remaining_ms: int  # Until every coin becomes votable again
    voted_coins: list[VotedCoin]


class GetVoteStatusUseCase:
    """Use case listing the coins the user voted for today."""

    def __init__(
        self, voting_service: VotingService, day_boundary: DayBoundary
    ) -> None:
        self.voting_service = voting_service
        self.day_boundary = day_boundary

    async def execute(self, request: GetVoteStatusRequest) -> GetVoteStatusResponse:
        votes = await self.voting_service.voted_today(UserId(UUID(request.user_id)))
        return GetVoteStatusResponse(
            today=self.day_boundary.today(),
            remaining_ms=self.day_boundary.ms_until_next_midnight(),
            voted_coins=[
                VotedCoin(coin_id=vote.coin_id, voted_at=vote.created_at)
                for vote in votes
            ],
        )
