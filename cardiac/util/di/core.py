"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from cardiac.config import (
    AdminSettings,
    AuthSettings,
    MarketDataSettings,
    Settings,
    VotingSettings,
)
from cardiac.util.cache import TTLCache
from cardiac.util.di.base import ProviderBase
from cardiac.util.usage import ApiUsageCounter


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide voting settings."""
        return settings.voting

    @provide(scope=Scope.APP)
    def provide_market_data_settings(self, settings: Settings) -> MarketDataSettings:
        """Provide market data settings."""
        return settings.market_data

    @provide(scope=Scope.APP)
    def provide_admin_settings(self, settings: Settings) -> AdminSettings:
        """Provide admin settings."""
        return settings.admin


class ProdStateProvider(ProviderBase):
    """Process-wide mutable state.

    Both objects live exactly as long as the container (one per API
    process) and are shared by every request.
    """

    scope = Scope.APP

    @provide
    def provide_market_cache(self, settings: MarketDataSettings) -> TTLCache:
        """Provide the market data response cache."""
        return TTLCache(
            ttl_seconds=settings.cache_ttl_seconds,
            stale_ttl_seconds=settings.stale_ttl_seconds,
        )

    @provide
    def provide_usage_counter(self, settings: MarketDataSettings) -> ApiUsageCounter:
        """Provide the upstream call counter."""
        return ApiUsageCounter(
            reset_interval_seconds=settings.usage_reset_interval_seconds
        )
