"""Get admin stats use case."""

from pydantic import BaseModel

from cardiac.config import AdminSettings
from cardiac.domain.error import NotAuthorizedError
from cardiac.domain.service import LeaderboardService, MarketService, UserService
from cardiac.domain.value import CoinTally, VoteWindow


class GetAdminStatsRequest(BaseModel):
    """Admin stats request."""

    requester_email: str | None = None  # From the session token, if any


class TopCoin(BaseModel):
    """Most voted coin in a window."""

    coin_id: str
    coin_name: str
    count: int


class GetAdminStatsResponse(BaseModel):
    """Dashboard numbers."""

    api_hits_today: int
    total_users: int
    total_votes: int
    top_coin_all_time: TopCoin | None
    top_coin_24h: TopCoin | None


class GetAdminStatsUseCase:
    """Use case for the admin dashboard.

    When ``admin.emails`` is configured only those accounts may read the
    stats; otherwise the endpoint is public.
    """

    def __init__(
        self,
        leaderboard_service: LeaderboardService,
        user_service: UserService,
        market_service: MarketService,
        admin_settings: AdminSettings,
    ) -> None:
        self.leaderboard_service = leaderboard_service
        self.user_service = user_service
        self.market_service = market_service
        self.admin_settings = admin_settings

    async def execute(self, request: GetAdminStatsRequest) -> GetAdminStatsResponse:
        """Collect the stats.

        Raises:
            NotAuthorizedError: If an allow-list is set and the requester is
                not on it
        """
        allowed = {email.lower() for email in self.admin_settings.emails}
        if allowed and (request.requester_email or "").lower() not in allowed:
            raise NotAuthorizedError(
                "admin stats", request.requester_email or "anonymous"
            )

        top_all_time = await self.leaderboard_service.top_coin(VoteWindow.ALL_TIME)
        top_24h = await self.leaderboard_service.top_coin(VoteWindow.LAST_24_HOURS)

        return GetAdminStatsResponse(
            api_hits_today=self.market_service.api_hits,
            total_users=await self.user_service.count(),
            total_votes=await self.leaderboard_service.total_votes(),
            top_coin_all_time=_top(top_all_time),
            top_coin_24h=_top(top_24h),
        )


def _top(tally: CoinTally | None) -> TopCoin | None:
    if tally is None:
        return None
    return TopCoin(coin_id=tally.coin_id, coin_name=tally.coin_name, count=tally.count)
