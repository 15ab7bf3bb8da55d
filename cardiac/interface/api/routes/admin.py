"""Admin routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from cardiac.application.usecase.admin import (
    GetAdminStatsRequest,
    GetAdminStatsResponse,
    GetAdminStatsUseCase,
)
from cardiac.config import AdminSettings
from cardiac.domain.error import DomainError
from cardiac.domain.service import JWTService
from cardiac.interface.api.session import authenticate
from cardiac.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/stats", response_model=GetAdminStatsResponse)
async def get_admin_stats(
    get_admin_stats_use_case: FromDishka[GetAdminStatsUseCase],
    jwt_service: FromDishka[JWTService],
    admin_settings: FromDishka[AdminSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetAdminStatsResponse:
    """Dashboard numbers: users, votes, top coins and upstream API hits.

    Open to everyone unless ``ADMIN__EMAILS`` is set, in which case a
    session for one of those accounts is required.
    """
    try:
        requester_email = None
        if admin_settings.emails:
            session = authenticate(jwt_service, authorization, auth_token)
            requester_email = session.email
        return await get_admin_stats_use_case.execute(
            GetAdminStatsRequest(requester_email=requester_email)
        )
    except DomainError as e:
        logger.info(f"Admin stats refused: {e}")
        raise to_http_exception(e)
