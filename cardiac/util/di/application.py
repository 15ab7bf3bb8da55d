"""Application layer DI providers."""

from dishka import Scope, provide

from cardiac.application.usecase.admin import GetAdminStatsUseCase
from cardiac.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    SignupUseCase,
)
from cardiac.application.usecase.coin import (
    GetCoinDetailsUseCase,
    ListCoinsUseCase,
    SearchCoinsUseCase,
)
from cardiac.application.usecase.leaderboard import (
    GetTimeBasedVotesUseCase,
    GetVoteTotalsUseCase,
)
from cardiac.application.usecase.share import AwardShareUseCase
from cardiac.application.usecase.vote import (
    CastVoteUseCase,
    CheckVoteUseCase,
    GetVoteStatusUseCase,
    GetVotingHistoryUseCase,
)
from cardiac.config import AdminSettings
from cardiac.domain.service import (
    AuthService,
    DayBoundary,
    JWTService,
    LeaderboardService,
    MarketService,
    ShareService,
    UserService,
    VotingService,
)
from cardiac.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, voting_service: VotingService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(voting_service=voting_service)

    @provide
    def get_check_vote_use_case(
        self, voting_service: VotingService
    ) -> CheckVoteUseCase:
        """Provide check vote use case."""
        return CheckVoteUseCase(voting_service=voting_service)

    @provide
    def get_vote_status_use_case(
        self, voting_service: VotingService, day_boundary: DayBoundary
    ) -> GetVoteStatusUseCase:
        """Provide vote status use case."""
        return GetVoteStatusUseCase(
            voting_service=voting_service, day_boundary=day_boundary
        )

    @provide
    def get_voting_history_use_case(
        self,
        leaderboard_service: LeaderboardService,
        market_service: MarketService,
    ) -> GetVotingHistoryUseCase:
        """Provide voting history use case."""
        return GetVotingHistoryUseCase(
            leaderboard_service=leaderboard_service, market_service=market_service
        )

    # Leaderboard use cases
    @provide
    def get_vote_totals_use_case(
        self, leaderboard_service: LeaderboardService
    ) -> GetVoteTotalsUseCase:
        """Provide vote totals use case."""
        return GetVoteTotalsUseCase(leaderboard_service=leaderboard_service)

    @provide
    def get_time_based_votes_use_case(
        self, leaderboard_service: LeaderboardService
    ) -> GetTimeBasedVotesUseCase:
        """Provide time-based votes use case."""
        return GetTimeBasedVotesUseCase(leaderboard_service=leaderboard_service)

    # Share use cases
    @provide
    def get_award_share_use_case(
        self, share_service: ShareService
    ) -> AwardShareUseCase:
        """Provide award share use case."""
        return AwardShareUseCase(share_service=share_service)

    # Admin use cases
    @provide
    def get_admin_stats_use_case(
        self,
        leaderboard_service: LeaderboardService,
        user_service: UserService,
        market_service: MarketService,
        admin_settings: AdminSettings,
    ) -> GetAdminStatsUseCase:
        """Provide admin stats use case."""
        return GetAdminStatsUseCase(
            leaderboard_service=leaderboard_service,
            user_service=user_service,
            market_service=market_service,
            admin_settings=admin_settings,
        )

    # Coin use cases
    @provide
    def get_list_coins_use_case(self, market_service: MarketService) -> ListCoinsUseCase:
        """Provide coin listing use case."""
        return ListCoinsUseCase(market_service=market_service)

    @provide
    def get_search_coins_use_case(
        self, market_service: MarketService
    ) -> SearchCoinsUseCase:
        """Provide coin search use case."""
        return SearchCoinsUseCase(market_service=market_service)

    @provide
    def get_coin_details_use_case(
        self, market_service: MarketService
    ) -> GetCoinDetailsUseCase:
        """Provide coin details use case."""
        return GetCoinDetailsUseCase(market_service=market_service)
