"""Admin use cases."""

from .get_admin_stats import (
    GetAdminStatsRequest,
    GetAdminStatsResponse,
    GetAdminStatsUseCase,
    TopCoin,
)

__all__ = [
    "GetAdminStatsRequest",
    "GetAdminStatsResponse",
    "GetAdminStatsUseCase",
    "TopCoin",
]
