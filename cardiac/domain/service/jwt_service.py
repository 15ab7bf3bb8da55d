"""Session token domain service."""

import logfire

from cardiac.config import AuthSettings
from cardiac.domain.model import User
from cardiac.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and verifies session tokens.

    Token lifetimes run on wall-clock time (PyJWT checks ``exp`` against the
    system clock), independent of the voting Clock.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create a session token for a user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            return create_token(str(user.id), user.email.root, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("JWT token verification failed", error=str(e))
                raise
