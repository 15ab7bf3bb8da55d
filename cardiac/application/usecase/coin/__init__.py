"""Coin market data use cases."""

from .market import (
    GetCoinDetailsRequest,
    GetCoinDetailsUseCase,
    ListCoinsRequest,
    ListCoinsUseCase,
    SearchCoinsUseCase,
)

__all__ = [
    "GetCoinDetailsRequest",
    "GetCoinDetailsUseCase",
    "ListCoinsRequest",
    "ListCoinsUseCase",
    "SearchCoinsUseCase",
]
