"""Domain layer errors."""

from datetime import timedelta


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class DailyLimitReachedError(BusinessRuleViolationError):
    """Base for the once-per-day rules.

    Carries the time left until the next reset so callers can show a
    countdown.
    """

    code = "daily_limit_reached"

    def __init__(self, message: str, coin_id: str, remaining: timedelta):
        self.coin_id = coin_id
        self.remaining = remaining
        super().__init__(message)

    @property
    def remaining_ms(self) -> int:
        return max(0, int(self.remaining.total_seconds() * 1000))


class AlreadyVotedTodayError(DailyLimitReachedError):
    """Raised when a user votes again before the daily reset."""

    code = "already_voted_today"

    def __init__(self, coin_id: str, coin_name: str | None, remaining: timedelta):
        self.coin_name = coin_name
        super().__init__(
            f"You already voted for {coin_name or coin_id} today. "
            f"You can vote again at midnight ({format_remaining(remaining)}).",
            coin_id=coin_id,
            remaining=remaining,
        )


class AlreadyAwardedTodayError(DailyLimitReachedError):
    """Raised when share points for a coin were already awarded today."""

    code = "already_awarded_today"

    def __init__(self, coin_id: str, remaining: timedelta):
        super().__init__(
            "You have already received points for sharing this coin today. "
            f"Try again at midnight ({format_remaining(remaining)}).",
            coin_id=coin_id,
            remaining=remaining,
        )


class EmailAlreadyRegisteredError(BusinessRuleViolationError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists")


class InvalidCredentialsError(DomainError):
    """Raised when an email/password pair does not match."""

    def __init__(self):
        super().__init__("Invalid credentials")


class CaptchaVerificationError(DomainError):
    """Raised when the human verification challenge is missing or rejected."""

    pass


class AuthenticationError(DomainError):
    """Raised when a session token is missing, invalid or expired."""

    def __init__(self, message: str = "Authentication required", missing: bool = True):
        self.missing = missing
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when an authenticated user lacks access to a resource."""

    def __init__(self, resource: str, user_id: str):
        super().__init__(f"User {user_id} is not authorized to access {resource}")


class UpstreamUnavailableError(DomainError):
    """Raised when the market data provider cannot be reached or errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


def format_remaining(remaining: timedelta) -> str:
    """Render a countdown as "in 5h 12m"."""
    total_minutes = max(0, int(remaining.total_seconds())) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"in {hours}h {minutes}m"
