"""Market data domain service.

Proxies the upstream market data provider (CoinGecko) through a
process-wide cache. Upstream payloads are passed through as-is.
"""

from typing import Any, Awaitable, Callable

import logfire

from cardiac.domain.error import UpstreamUnavailableError, ValidationError
from cardiac.domain.value import CoinId, CoinMarketSnapshot
from cardiac.util.cache import TTLCache
from cardiac.util.usage import ApiUsageCounter

from .base import Service


class MarketDataClient:
    """Upstream market data interface."""

    async def markets(
        self,
        vs_currency: str = "usd",
        order: str = "market_cap_desc",
        per_page: int | None = None,
        page: int | None = None,
        sparkline: bool = False,
        ids: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch the coin markets listing.

        Raises:
            UpstreamUnavailableError: If the provider fails or is unreachable
        """
        raise NotImplementedError

    async def search(self, query: str) -> dict[str, Any]:
        """Search coins, exchanges and categories by free text.

        Raises:
            UpstreamUnavailableError: If the provider fails or is unreachable
        """
        raise NotImplementedError


class MarketService(Service):
    """Cached access to market data.

    Every actual upstream request increments the usage counter; cache hits
    do not. When the upstream fails, a cached response past its TTL but
    within the stale window is served instead.
    """

    def __init__(
        self,
        client: MarketDataClient,
        cache: TTLCache,
        usage_counter: ApiUsageCounter,
    ) -> None:
        """Initialize market service.

        Args:
            client: Upstream market data client
            cache: Process-wide response cache
            usage_counter: Process-wide upstream call counter
        """
        self.client = client
        self.cache = cache
        self.usage_counter = usage_counter

    async def list_markets(
        self,
        vs_currency: str = "usd",
        order: str = "market_cap_desc",
        per_page: int = 100,
        page: int = 1,
        sparkline: bool = False,
    ) -> list[dict[str, Any]]:
        """Coin markets listing (one page)."""
        key = f"coins_{vs_currency}_{order}_{per_page}_{page}_{sparkline}"
        return await self._cached(
            key,
            lambda: self.client.markets(
                vs_currency=vs_currency,
                order=order,
                per_page=per_page,
                page=page,
                sparkline=sparkline,
            ),
        )

    async def search(self, query: str) -> dict[str, Any]:
        """Free-text coin search.

        Raises:
            ValidationError: If the query is empty
        """
        query = query.strip() if query else ""
        if not query:
            raise ValidationError("Query parameter is required")
        return await self._cached(
            f"search_{query}", lambda: self.client.search(query)
        )

    async def coin_details(
        self, ids: list[str], vs_currency: str = "usd"
    ) -> list[dict[str, Any]]:
        """Market rows for specific coin ids.

        Raises:
            ValidationError: If no ids are given
        """
        ids = [coin_id.strip() for coin_id in ids if coin_id and coin_id.strip()]
        if not ids:
            raise ValidationError("IDs parameter is required")
        key = f"details_{','.join(ids)}_{vs_currency}"
        return await self._cached(
            key,
            lambda: self.client.markets(
                vs_currency=vs_currency, order="market_cap_desc", ids=ids
            ),
        )

    async def coin_snapshots(
        self, coin_ids: list[CoinId]
    ) -> dict[CoinId, CoinMarketSnapshot]:
        """Image, price and symbol for each coin, best effort.

        Returns an empty mapping when the upstream is unavailable, so callers
        can render their own data without market enrichment.
        """
        unique_ids = list(dict.fromkeys(coin_ids))
        if not unique_ids:
            return {}

        try:
            rows = await self.coin_details(unique_ids)
        except UpstreamUnavailableError as e:
            logfire.warn("Market enrichment skipped", error=str(e))
            return {}

        snapshots: dict[CoinId, CoinMarketSnapshot] = {}
        for row in rows:
            coin_id = row.get("id")
            if not coin_id:
                continue
            snapshots[CoinId(coin_id)] = CoinMarketSnapshot(
                image=row.get("image"),
                current_price=row.get("current_price"),
                symbol=row.get("symbol"),
            )
        return snapshots

    @property
    def api_hits(self) -> int:
        """Upstream requests made since the last counter reset."""
        return self.usage_counter.value

    async def _cached(self, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        with logfire.span("market_service.fetch", cache_key=key):
            self.usage_counter.increment()
            try:
                data = await fetch()
            except UpstreamUnavailableError as e:
                stale = self.cache.get_stale(key)
                if stale is None:
                    logfire.error(
                        "Market data unavailable", cache_key=key, error=str(e)
                    )
                    raise
                logfire.warn("Serving stale market data", cache_key=key, error=str(e))
                return stale

            self.cache.set(key, data)
            return data
