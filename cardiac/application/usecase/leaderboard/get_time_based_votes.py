"""Get time-based votes use case."""

from pydantic import BaseModel, RootModel

from cardiac.domain.service import LeaderboardService


class WindowCounts(BaseModel):
    """Counts for one coin.

    votes_24h is the current reference day (it resets at midnight), while
    votes_7d and votes_3m are rolling windows.
    """

    votes_24h: int
    votes_7d: int
    votes_3m: int


class TimeBasedVotesResponse(RootModel[dict[str, WindowCounts]]):
    """Window counts keyed by coin id."""


class GetTimeBasedVotesUseCase:
    """Use case for the leaderboard's time filters."""

    def __init__(self, leaderboard_service: LeaderboardService) -> None:
        self.leaderboard_service = leaderboard_service

    async def execute(self) -> TimeBasedVotesResponse:
        votes = await self.leaderboard_service.time_based_votes()
        return TimeBasedVotesResponse(
            {
                str(coin_id): WindowCounts(
                    votes_24h=counts.votes_24h,
                    votes_7d=counts.votes_7d,
                    votes_3m=counts.votes_3m,
                )
                for coin_id, counts in votes.items()
            }
        )
