"""Social share routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel, ConfigDict, Field

from cardiac.application.usecase.share import (
    AwardShareRequest,
    AwardShareResponse,
    AwardShareUseCase,
)
from cardiac.domain.error import DomainError
from cardiac.domain.service import JWTService
from cardiac.interface.api.session import authenticate
from cardiac.interface.error import to_http_exception

router = APIRouter(prefix="/share", tags=["share"], route_class=DishkaRoute)


class ShareBody(BaseModel):
    """Share request body. Accepts ``coin_id`` or ``coinId``."""

    model_config = ConfigDict(populate_by_name=True)

    coin_id: str = Field(default="", alias="coinId")


@router.post("/x", response_model=AwardShareResponse)
async def share_on_x(
    body: ShareBody,
    award_share_use_case: FromDishka[AwardShareUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AwardShareResponse:
    """Credit a share of a coin on X with one share point.

    Requires authentication. At most one point per coin per day.

    Example:
        POST /share/x
        {"coinId": "bitcoin"}

        Response:
        {"message": "Share points updated", "coin_id": "bitcoin", "share_points": 3}
    """
    try:
        session = authenticate(jwt_service, authorization, auth_token)
        return await award_share_use_case.execute(
            AwardShareRequest(user_id=session.user_id, coin_id=body.coin_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
