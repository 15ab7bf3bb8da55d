"""Signup use case."""

from pydantic import BaseModel, ConfigDict, Field

from cardiac.domain.service import AuthService, JWTService

from .common import AuthResponse, UserInfo


class SignupRequest(BaseModel):
    """Signup request.

    Accepts ``captcha_token`` or the browser client's ``captchaToken``.
    Missing email or password is reported by the domain as a 400, not as a
    schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str = ""
    password: str = ""
    captcha_token: str | None = Field(default=None, alias="captchaToken")
    remote_ip: str | None = Field(default=None, exclude=True)


class SignupUseCase:
    """Use case for email/password registration."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: Session token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Register the user and open a session.

        Raises:
            ValidationError: If email or password is missing or invalid
            CaptchaVerificationError: If the captcha fails
            EmailAlreadyRegisteredError: If the email is taken
        """
        user = await self.auth_service.signup(
            email=request.email,
            password=request.password,
            captcha_token=request.captcha_token,
            remote_ip=request.remote_ip,
        )
        return AuthResponse(
            token=self.jwt_service.create_token(user),
            user=UserInfo.from_user(user),
        )
