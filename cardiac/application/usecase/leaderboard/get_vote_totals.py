"""Get vote totals use case."""

from pydantic import RootModel

from cardiac.domain.service import LeaderboardService
from cardiac.domain.value import VoteWindow


class VoteTotalsResponse(RootModel[dict[str, int]]):
    """Vote count keyed by coin id."""


class GetVoteTotalsUseCase:
    """Use case for per-coin vote totals."""

    def __init__(self, leaderboard_service: LeaderboardService) -> None:
        self.leaderboard_service = leaderboard_service

    async def execute(
        self, window: VoteWindow = VoteWindow.ALL_TIME
    ) -> VoteTotalsResponse:
        counts = await self.leaderboard_service.windowed_votes_by_coin(window)
        return VoteTotalsResponse({str(coin_id): n for coin_id, n in counts.items()})
