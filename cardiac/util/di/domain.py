"""Domain layer DI providers."""

from dishka import Scope, provide

from cardiac.config import AuthSettings, Settings, VotingSettings
from cardiac.domain.repository import (
    ShareLogRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from cardiac.domain.service import (
    AuthService,
    CaptchaVerifier,
    DayBoundary,
    JWTService,
    LeaderboardService,
    MarketDataClient,
    MarketService,
    ShareService,
    UserService,
    VotingService,
)
from cardiac.domain.value import VotingScope
from cardiac.util.cache import TTLCache
from cardiac.util.clock import Clock
from cardiac.util.di.base import ProviderBase
from cardiac.util.usage import ApiUsageCounter


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_day_boundary(
        self, clock: Clock, voting_settings: VotingSettings
    ) -> DayBoundary:
        """Provide the reference-timezone day boundary."""
        return DayBoundary(
            clock=clock, reference_timezone=voting_settings.reference_timezone
        )

    @provide
    def get_voting_service(
        self,
        vote_repository: VoteRepository,
        user_repository: UserRepository,
        day_boundary: DayBoundary,
        unit_of_work: UnitOfWork,
        voting_settings: VotingSettings,
    ) -> VotingService:
        """Provide voting domain service."""
        return VotingService(
            vote_repository=vote_repository,
            user_repository=user_repository,
            day_boundary=day_boundary,
            unit_of_work=unit_of_work,
            scope=VotingScope(voting_settings.scope),
        )

    @provide
    def get_share_service(
        self,
        share_log_repository: ShareLogRepository,
        user_repository: UserRepository,
        day_boundary: DayBoundary,
        unit_of_work: UnitOfWork,
    ) -> ShareService:
        """Provide share points domain service."""
        return ShareService(
            share_log_repository=share_log_repository,
            user_repository=user_repository,
            day_boundary=day_boundary,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_leaderboard_service(
        self, vote_repository: VoteRepository, day_boundary: DayBoundary
    ) -> LeaderboardService:
        """Provide leaderboard domain service."""
        return LeaderboardService(
            vote_repository=vote_repository, day_boundary=day_boundary
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_auth_service(
        self,
        user_service: UserService,
        captcha_verifier: CaptchaVerifier,
        unit_of_work: UnitOfWork,
        clock: Clock,
        settings: Settings,
    ) -> AuthService:
        """Provide email/password authentication domain service."""
        return AuthService(
            user_service=user_service,
            captcha_verifier=captcha_verifier,
            unit_of_work=unit_of_work,
            clock=clock,
            captcha_required=settings.captcha.enabled,
            bcrypt_rounds=settings.auth.bcrypt_rounds,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_market_service(
        self,
        client: MarketDataClient,
        cache: TTLCache,
        usage_counter: ApiUsageCounter,
    ) -> MarketService:
        """Provide market data domain service."""
        return MarketService(client=client, cache=cache, usage_counter=usage_counter)
