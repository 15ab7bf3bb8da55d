"""Get voting history use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from cardiac.domain.service import LeaderboardService, MarketService
from cardiac.domain.value import CoinMarketSnapshot, UserId


class GetVotingHistoryRequest(BaseModel):
    """Voting history request."""

    user_id: str


class VotingHistoryEntry(BaseModel):
    """Latest vote for one coin, with market data when available."""

    coin_id: str
    coin_name: str
    voted_at: datetime
    market: CoinMarketSnapshot | None = None


class GetVotingHistoryResponse(BaseModel):
    """Voting history, newest vote first."""

    votes: list[VotingHistoryEntry]


class GetVotingHistoryUseCase:
    """Use case for the "my votes" page.

    Market data is optional enrichment: if the upstream is down and nothing
    usable is cached, entries come back with ``market`` set to null.
    """

    def __init__(
        self,
        leaderboard_service: LeaderboardService,
        market_service: MarketService,
    ) -> None:
        self.leaderboard_service = leaderboard_service
        self.market_service = market_service

    async def execute(
        self, request: GetVotingHistoryRequest
    ) -> GetVotingHistoryResponse:
        votes = await self.leaderboard_service.voting_history(
            UserId(UUID(request.user_id))
        )
        if not votes:
            return GetVotingHistoryResponse(votes=[])

        snapshots = await self.market_service.coin_snapshots(
            [vote.coin_id for vote in votes]
        )

        return GetVotingHistoryResponse(
            votes=[
                VotingHistoryEntry(
                    coin_id=vote.coin_id,
                    coin_name=vote.coin_name,
                    voted_at=vote.created_at,
                    market=snapshots.get(vote.coin_id),
                )
                for vote in votes
            ]
        )
