"""Vote and leaderboard routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, ConfigDict, Field

from cardiac.application.usecase.leaderboard import (
    GetTimeBasedVotesUseCase,
    GetVoteTotalsUseCase,
    TimeBasedVotesResponse,
    VoteTotalsResponse,
)
from cardiac.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    CheckVoteRequest,
    CheckVoteResponse,
    CheckVoteUseCase,
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
    GetVotingHistoryRequest,
    GetVotingHistoryResponse,
    GetVotingHistoryUseCase,
)
from cardiac.domain.error import DomainError
from cardiac.domain.service import JWTService
from cardiac.domain.value import VoteWindow
from cardiac.interface.api.session import authenticate
from cardiac.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteBody(BaseModel):
    """Vote request body. Accepts snake_case or camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    coin_id: str = Field(default="", alias="coinId")
    coin_name: str = Field(default="", alias="coinName")


@router.get("", response_model=VoteTotalsResponse)
async def get_vote_totals(
    get_vote_totals_use_case: FromDishka[GetVoteTotalsUseCase],
    window: VoteWindow = VoteWindow.ALL_TIME,
) -> VoteTotalsResponse:
    """Vote count per coin.

    Example:
        GET /votes
        {"bitcoin": 12, "ethereum": 7}

        GET /votes?window=today
    """
    return await get_vote_totals_use_case.execute(window)


@router.get("/time-based", response_model=TimeBasedVotesResponse)
async def get_time_based_votes(
    get_time_based_votes_use_case: FromDishka[GetTimeBasedVotesUseCase],
) -> TimeBasedVotesResponse:
    """Per-coin counts for today, the last 7 days and the last 90 days.

    Example:
        GET /votes/time-based
        {"bitcoin": {"votes_24h": 3, "votes_7d": 9, "votes_3m": 12}}
    """
    return await get_time_based_votes_use_case.execute()


@router.get("/status", response_model=GetVoteStatusResponse)
async def get_vote_status(
    get_vote_status_use_case: FromDishka[GetVoteStatusUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetVoteStatusResponse:
    """Coins the caller already voted for today.

    Requires authentication.
    """
    try:
        session = authenticate(jwt_service, authorization, auth_token)
        return await get_vote_status_use_case.execute(
            GetVoteStatusRequest(user_id=session.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/check/{coin_id}", response_model=CheckVoteResponse)
async def check_vote(
    coin_id: str,
    check_vote_use_case: FromDishka[CheckVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CheckVoteResponse:
    """Whether the caller may vote for a coin right now.

    Requires authentication. Never records anything.
    """
    try:
        session = authenticate(jwt_service, authorization, auth_token)
        return await check_vote_use_case.execute(
            CheckVoteRequest(user_id=session.user_id, coin_id=coin_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("", response_model=CastVoteResponse, status_code=status.HTTP_201_CREATED)
async def cast_vote(
    body: CastVoteBody,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Cast today's vote for a coin.

    Requires authentication.

    Example:
        POST /votes
        {"coin_id": "bitcoin", "coin_name": "Bitcoin"}

    Raises:
        HTTPException: 400 with ``{error, message, coin_id, remaining_ms}``
            when the caller already voted for this coin today
            or 404 if the caller's account no longer exists
    """
    try:
        session = authenticate(jwt_service, authorization, auth_token)
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                user_id=session.user_id,
                coin_id=body.coin_id,
                coin_name=body.coin_name,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/history", response_model=GetVotingHistoryResponse)
async def get_voting_history(
    get_voting_history_use_case: FromDishka[GetVotingHistoryUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetVotingHistoryResponse:
    """The caller's latest vote per coin, newest first, with market data.

    Requires authentication. ``market`` is null for every entry when market
    data cannot be fetched.
    """
    try:
        session = authenticate(jwt_service, authorization, auth_token)
        return await get_voting_history_use_case.execute(
            GetVotingHistoryRequest(user_id=session.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
