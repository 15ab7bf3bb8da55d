"""Share use cases."""

from .award_share import AwardShareRequest, AwardShareResponse, AwardShareUseCase

__all__ = ["AwardShareRequest", "AwardShareResponse", "AwardShareUseCase"]
