"""Login use case."""

from pydantic import BaseModel

from cardiac.domain.service import AuthService, JWTService

from .common import AuthResponse, UserInfo


class LoginRequest(BaseModel):
    """Login request."""

    email: str = ""
    password: str = ""


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Verify credentials and issue a session token.

        Raises:
            InvalidCredentialsError: If the email/password pair does not match
        """
        user = await self.auth_service.authenticate(request.email, request.password)
        return AuthResponse(
            token=self.jwt_service.create_token(user),
            user=UserInfo.from_user(user),
        )
