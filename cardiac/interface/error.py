"""Interface layer errors.

Maps domain errors onto HTTP responses. Business rejections are expected
outcomes and are not logged as errors.
"""

import logging

from fastapi import HTTPException, status

from cardiac.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    CaptchaVerificationError,
    DailyLimitReachedError,
    DomainError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def rejection_detail(error: DailyLimitReachedError) -> dict:
    """Structured body for a once-per-day rejection.

    Carries the offending coin and the countdown so clients can render
    "vote again in 5h 12m" without parsing the message.
    """
    return {
        "error": error.code,
        "message": str(error),
        "coin_id": error.coin_id,
        "remaining_ms": error.remaining_ms,
    }


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into the HTTPException a route should raise."""
    if isinstance(error, DailyLimitReachedError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=rejection_detail(error)
        )

    if isinstance(
        error,
        (
            ValidationError,
            BusinessRuleViolationError,
            InvalidCredentialsError,
            CaptchaVerificationError,
        ),
    ):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, AuthenticationError):
        return HTTPException(
            status_code=(
                status.HTTP_401_UNAUTHORIZED
                if error.missing
                else status.HTTP_403_FORBIDDEN
            ),
            detail=str(error),
        )

    if isinstance(error, NotAuthorizedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))

    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))

    if isinstance(error, UpstreamUnavailableError):
        logger.error(f"Market data unavailable: {error}")
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch coin data",
        )

    logger.error(f"Unhandled domain error: {type(error).__name__}: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
    )
