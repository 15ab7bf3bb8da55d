"""CoinGecko market data adapter."""

from .client import CoinGeckoClient, MockCoinGeckoClient, RealCoinGeckoClient

__all__ = ["CoinGeckoClient", "MockCoinGeckoClient", "RealCoinGeckoClient"]
