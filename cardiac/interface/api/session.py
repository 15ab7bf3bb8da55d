"""Session token extraction for routes.

A session token is accepted from the ``Authorization: Bearer`` header or
the ``auth_token`` cookie, header first.
"""

from cardiac.domain.error import AuthenticationError
from cardiac.domain.service import JWTService
from cardiac.util.jwt import JWTError, TokenPayload

AUTH_COOKIE = "auth_token"


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the session token out of the header or cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None


def authenticate(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
) -> TokenPayload:
    """Verify the caller's session.

    Raises:
        AuthenticationError: missing=True when no token was sent (401),
            missing=False when the token is invalid or expired (403)
    """
    token = extract_token(authorization, auth_token)
    if not token:
        raise AuthenticationError("Authentication required", missing=True)

    try:
        return jwt_service.verify_token(token)
    except JWTError as e:
        raise AuthenticationError(str(e), missing=False) from e
