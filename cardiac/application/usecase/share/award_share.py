"""Award share use case."""

from uuid import UUID

from pydantic import BaseModel

from cardiac.domain.error import ValidationError
from cardiac.domain.service import ShareService
from cardiac.domain.value import CoinId, UserId


class AwardShareRequest(BaseModel):
    """Award share request."""

    user_id: str
    coin_id: str


class AwardShareResponse(BaseModel):
    """Award share response."""

    message: str = "Share points updated"
    coin_id: str
    share_points: int


class AwardShareUseCase:
    """Use case for crediting a social share."""

    def __init__(self, share_service: ShareService) -> None:
        self.share_service = share_service

    async def execute(self, request: AwardShareRequest) -> AwardShareResponse:
        """Award one share point for the coin.

        Raises:
            ValidationError: If the coin id is blank
            AlreadyAwardedTodayError: If already awarded for this coin today
            NotFoundError: If the user no longer exists
        """
        coin_id = request.coin_id.strip()
        if not coin_id:
            raise ValidationError("Coin ID is required")

        award = await self.share_service.award_share(
            UserId(UUID(request.user_id)), CoinId(coin_id)
        )
        return AwardShareResponse(coin_id=coin_id, share_points=award.new_total)
