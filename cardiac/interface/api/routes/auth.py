"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Request, Response, status
from pydantic import BaseModel

from cardiac.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from cardiac.config import Settings
from cardiac.domain.error import DomainError
from cardiac.domain.service import JWTService
from cardiac.interface.api.session import AUTH_COOKIE, authenticate
from cardiac.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    # Production serves the frontend from another origin, which needs
    # samesite=none and therefore secure
    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_hours * 60 * 60,
    )


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    body: SignupRequest,
    request: Request,
    response: Response,
    signup_use_case: FromDishka[SignupUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Register with email and password.

    The captcha token is checked with Cloudflare Turnstile unless captcha
    verification is disabled. On success the session token is returned in
    the body and set as the ``auth_token`` cookie.

    Example:
        POST /auth/signup
        {"email": "alice@example.com", "password": "...", "captchaToken": "..."}

    Raises:
        HTTPException: 400 on invalid input, failed captcha or taken email
    """
    remote_ip = request.client.host if request.client else None
    try:
        result = await signup_use_case.execute(
            body.model_copy(update={"remote_ip": remote_ip})
        )
    except DomainError as e:
        raise to_http_exception(e)

    logger.info(f"Signup succeeded for user {result.user.id}")
    _set_session_cookie(response, result.token, settings)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Log in with email and password.

    Raises:
        HTTPException: 400 if the credentials do not match an account
    """
    try:
        result = await login_use_case.execute(body)
    except DomainError as e:
        raise to_http_exception(e)

    _set_session_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing the session cookie."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the signed-in user, including share points.

    Raises:
        HTTPException: 401 without a token, 403 with an invalid one, 404 if
            the account no longer exists
    """
    try:
        session = authenticate(jwt_service, authorization, auth_token)
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=session.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
