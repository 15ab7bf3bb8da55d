"""Mock providers for testing."""

from .clock import MockClockProvider
from .coingecko import MockCoinGeckoProvider
from .persistence import MockPersistenceProvider
from .turnstile import MockTurnstileProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockCoinGeckoProvider",
    "MockPersistenceProvider",
    "MockTurnstileProvider",
    "build_test_container",
]
