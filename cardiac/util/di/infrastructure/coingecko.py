"""CoinGecko infrastructure providers."""

from dishka import Scope, provide

from cardiac.adapter.coingecko import RealCoinGeckoClient
from cardiac.config import MarketDataSettings
from cardiac.domain.service import MarketDataClient
from cardiac.util.di.base import ProviderBase


class CoinGeckoProvider(ProviderBase):
    """CoinGecko component base."""

    __mock_component__ = "coingecko"


class ProdCoinGeckoProvider(CoinGeckoProvider):
    """Production CoinGecko provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_coingecko_client(self, settings: MarketDataSettings) -> MarketDataClient:
        """Provide CoinGecko market data client.

        Returns:
            CoinGecko REST client
        """
        return RealCoinGeckoClient(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout_seconds=settings.timeout_seconds,
        )
