"""CoinGecko REST client.

Only the two endpoints the API proxies are wrapped: /coins/markets and
/search. Responses are returned as parsed JSON without reshaping.
"""

import logging
from typing import Any

import httpx
import logfire

from cardiac.adapter.error import CoinGeckoError
from cardiac.domain.service.market_service import MarketDataClient

logger = logging.getLogger(__name__)


class CoinGeckoClient(MarketDataClient):
    """Base class for CoinGecko clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealCoinGeckoClient(CoinGeckoClient):
    """CoinGecko client over httpx."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize CoinGecko client.

        Args:
            base_url: API root, e.g. https://api.coingecko.com/api/v3
            api_key: Optional demo API key
            timeout_seconds: Per-request timeout
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds

    async def markets(
        self,
        vs_currency: str = "usd",
        order: str = "market_cap_desc",
        per_page: int | None = None,
        page: int | None = None,
        sparkline: bool = False,
        ids: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "vs_currency": vs_currency,
            "order": order,
            "sparkline": str(sparkline).lower(),
        }
        if per_page is not None:
            params["per_page"] = per_page
        if page is not None:
            params["page"] = page
        if ids:
            params["ids"] = ",".join(ids)

        return await self._get("/coins/markets", params)

    async def search(self, query: str) -> dict[str, Any]:
        return await self._get("/search", {"query": query})

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        headers = {"accept": "application/json"}
        if self.api_key:
            headers["x-cg-demo-api-key"] = self.api_key

        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"CoinGecko request to {path} failed: {e}")
            raise CoinGeckoError(f"CoinGecko request failed: {e}") from e

        if response.status_code >= 400:
            logfire.error(
                "CoinGecko returned an error",
                path=path,
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise CoinGeckoError(
                f"CoinGecko returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise CoinGeckoError("CoinGecko returned a non-JSON body") from e


# Mock implementation for testing
class MockCoinGeckoClient(CoinGeckoClient):
    """Mock CoinGecko client for testing.

    Serves a small fixed market list. Set ``fail`` to make every call raise,
    and read ``calls`` to see how many requests reached the "upstream".
    """

    COINS: list[dict[str, Any]] = [
        {
            "id": "bitcoin",
            "symbol": "btc",
            "name": "Bitcoin",
            "image": "https://assets.coingecko.com/coins/images/1/large/bitcoin.png",
            "current_price": 65000.0,
            "market_cap_rank": 1,
        },
        {
            "id": "ethereum",
            "symbol": "eth",
            "name": "Ethereum",
            "image": "https://assets.coingecko.com/coins/images/279/large/ethereum.png",
            "current_price": 3200.0,
            "market_cap_rank": 2,
        },
        {
            "id": "dogecoin",
            "symbol": "doge",
            "name": "Dogecoin",
            "image": "https://assets.coingecko.com/coins/images/5/large/dogecoin.png",
            "current_price": 0.15,
            "market_cap_rank": 9,
        },
    ]

    def __init__(self) -> None:
        self.fail = False
        self.calls = 0

    async def markets(
        self,
        vs_currency: str = "usd",
        order: str = "market_cap_desc",
        per_page: int | None = None,
        page: int | None = None,
        sparkline: bool = False,
        ids: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        self._hit()
        coins = [c for c in self.COINS if not ids or c["id"] in ids]
        if per_page is not None:
            start = ((page or 1) - 1) * per_page
            coins = coins[start : start + per_page]
        return [dict(c) for c in coins]

    async def search(self, query: str) -> dict[str, Any]:
        self._hit()
        needle = query.lower()
        matches = [
            {
                "id": c["id"],
                "name": c["name"],
                "symbol": c["symbol"].upper(),
                "market_cap_rank": c["market_cap_rank"],
            }
            for c in self.COINS
            if needle in c["id"] or needle in c["name"].lower()
        ]
        return {"coins": matches, "exchanges": [], "categories": []}

    def _hit(self) -> None:
        self.calls += 1
        if self.fail:
            raise CoinGeckoError("Mock CoinGecko is down", status_code=503)
