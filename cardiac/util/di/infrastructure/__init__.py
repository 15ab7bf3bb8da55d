"""Infrastructure providers."""

# Import bases
from .clock import ClockProvider
from .coingecko import CoinGeckoProvider
from .persistence import PersistenceProvider
from .turnstile import TurnstileProvider

# Import implementations (needed for __subclasses__())
from .clock import ProdClockProvider  # noqa: F401
from .coingecko import ProdCoinGeckoProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .turnstile import ProdTurnstileProvider  # noqa: F401

__all__ = [
    "ClockProvider",
    "CoinGeckoProvider",
    "PersistenceProvider",
    "ProdClockProvider",
    "ProdCoinGeckoProvider",
    "ProdPersistenceProvider",
    "ProdTurnstileProvider",
    "TurnstileProvider",
]
