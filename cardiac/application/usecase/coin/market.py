"""Coin market data use cases.

Thin pass-throughs to MarketService; upstream payloads are returned
unchanged.
"""

from typing import Any

from pydantic import BaseModel, Field

from cardiac.domain.service import MarketService


class ListCoinsRequest(BaseModel):
    """Markets listing query."""

    vs_currency: str = "usd"
    order: str = "market_cap_desc"
    per_page: int = Field(default=100, ge=1, le=250)
    page: int = Field(default=1, ge=1)
    sparkline: bool = False


class ListCoinsUseCase:
    """Use case for the cached coin markets listing."""

    def __init__(self, market_service: MarketService) -> None:
        self.market_service = market_service

    async def execute(self, request: ListCoinsRequest) -> list[dict[str, Any]]:
        return await self.market_service.list_markets(
            vs_currency=request.vs_currency,
            order=request.order,
            per_page=request.per_page,
            page=request.page,
            sparkline=request.sparkline,
        )


class SearchCoinsUseCase:
    """Use case for the cached coin search."""

    def __init__(self, market_service: MarketService) -> None:
        self.market_service = market_service

    async def execute(self, query: str) -> dict[str, Any]:
        """Search coins.

        Raises:
            ValidationError: If the query is empty
        """
        return await self.market_service.search(query)


class GetCoinDetailsRequest(BaseModel):
    """Market rows for specific coins."""

    ids: str = ""  # Comma-separated coin ids
    vs_currency: str = "usd"


class GetCoinDetailsUseCase:
    """Use case for the cached markets-by-ids lookup."""

    def __init__(self, market_service: MarketService) -> None:
        self.market_service = market_service

    async def execute(self, request: GetCoinDetailsRequest) -> list[dict[str, Any]]:
        """Fetch market rows.

        Raises:
            ValidationError: If no ids are given
        """
        return await self.market_service.coin_details(
            request.ids.split(","), vs_currency=request.vs_currency
        )
