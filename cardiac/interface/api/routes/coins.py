"""Coin market data routes.

Cached pass-through of the CoinGecko endpoints the frontend needs, so the
upstream API key stays on the server and rate limits are shared.
"""

import logging
from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from cardiac.application.usecase.coin import (
    GetCoinDetailsRequest,
    GetCoinDetailsUseCase,
    ListCoinsRequest,
    ListCoinsUseCase,
    SearchCoinsUseCase,
)
from cardiac.domain.error import DomainError
from cardiac.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/coins", tags=["coins"], route_class=DishkaRoute)


@router.get("")
async def list_coins(
    list_coins_use_case: FromDishka[ListCoinsUseCase],
    vs_currency: str = "usd",
    order: str = "market_cap_desc",
    per_page: int = Query(default=100, ge=1, le=250),
    page: int = Query(default=1, ge=1),
    sparkline: bool = False,
) -> list[dict[str, Any]]:
    """One page of the coin markets listing.

    Example:
        GET /coins?per_page=50&page=2
    """
    try:
        return await list_coins_use_case.execute(
            ListCoinsRequest(
                vs_currency=vs_currency,
                order=order,
                per_page=per_page,
                page=page,
                sparkline=sparkline,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/search")
async def search_coins(
    search_coins_use_case: FromDishka[SearchCoinsUseCase],
    query: str = "",
) -> dict[str, Any]:
    """Search coins by name or symbol.

    Example:
        GET /coins/search?query=doge
    """
    try:
        return await search_coins_use_case.execute(query)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/details")
async def get_coin_details(
    get_coin_details_use_case: FromDishka[GetCoinDetailsUseCase],
    ids: str = "",
    vs_currency: str = "usd",
) -> list[dict[str, Any]]:
    """Market rows for a comma-separated list of coin ids.

    Example:
        GET /coins/details?ids=bitcoin,ethereum
    """
    try:
        return await get_coin_details_use_case.execute(
            GetCoinDetailsRequest(ids=ids, vs_currency=vs_currency)
        )
    except DomainError as e:
        raise to_http_exception(e)
