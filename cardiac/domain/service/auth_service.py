"""Authentication domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from cardiac.domain.error import (
    CaptchaVerificationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    ValidationError,
)
from cardiac.domain.model import User
from cardiac.domain.repository import UnitOfWork
from cardiac.domain.repository.constraint import UNIQUE_USER_EMAIL, is_violation_of
from cardiac.domain.value import Email, UserId
from cardiac.util.clock import Clock
from cardiac.util.error import PasswordHashError
from cardiac.util.password import MAX_PASSWORD_BYTES, hash_password, verify_password

from .base import Service
from .user_service import UserService


class CaptchaVerifier:
    """Human verification interface (Cloudflare Turnstile and mocks)."""

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        """Check a challenge token with the verification provider.

        Args:
            token: Token produced by the client-side widget
            remote_ip: Caller's IP address, if known

        Returns:
            True if the provider accepted the token
        """
        raise NotImplementedError


class AuthService(Service):
    """Email/password registration and credential checks."""

    def __init__(
        self,
        user_service: UserService,
        captcha_verifier: CaptchaVerifier,
        unit_of_work: UnitOfWork,
        clock: Clock,
        captcha_required: bool = True,
        bcrypt_rounds: int = 10,
    ) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
            captcha_verifier: Human verification provider
            unit_of_work: Transaction boundary for the user insert
            clock: Source of created_at
            captcha_required: Whether signup must pass the captcha
            bcrypt_rounds: bcrypt cost factor for new hashes
        """
        self.user_service = user_service
        self.captcha_verifier = captcha_verifier
        self.unit_of_work = unit_of_work
        self.clock = clock
        self.captcha_required = captcha_required
        self.bcrypt_rounds = bcrypt_rounds

    async def signup(
        self,
        email: str,
        password: str,
        captcha_token: str | None = None,
        remote_ip: str | None = None,
    ) -> User:
        """Register a new user.

        Args:
            email: Email address (normalized to lowercase)
            password: Plaintext password
            captcha_token: Human verification token
            remote_ip: Caller's IP address, forwarded to the verifier

        Returns:
            The created user, with 0 share points

        Raises:
            ValidationError: If the email or password is unacceptable
            CaptchaVerificationError: If the captcha is missing or rejected
            EmailAlreadyRegisteredError: If the email already has an account
        """
        normalized = _parse_email(email)
        _check_password(password)

        with logfire.span("auth_service.signup", email=normalized.root):
            if self.captcha_required:
                if not captcha_token:
                    raise CaptchaVerificationError("CAPTCHA verification failed")
                if not await self.captcha_verifier.verify(captcha_token, remote_ip):
                    logfire.info("Signup captcha rejected", email=normalized.root)
                    raise CaptchaVerificationError(
                        "CAPTCHA verification failed. Please try again."
                    )

            if await self.user_service.get_user_by_email(normalized):
                raise EmailAlreadyRegisteredError(normalized.root)

            user = User(
                id=UserId(uuid4()),
                email=normalized,
                password_hash=hash_password(password, rounds=self.bcrypt_rounds),
                share_points=0,
                created_at=self.clock.now(),
            )

            try:
                async with self.unit_of_work.transaction():
                    saved = await self.user_service.save(user)
            except IntegrityError as e:
                if not is_violation_of(e, UNIQUE_USER_EMAIL):
                    raise
                # Concurrent signup with the same email
                raise EmailAlreadyRegisteredError(normalized.root)

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Unknown email and wrong password are indistinguishable to the caller.

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If the pair does not match an account
        """
        try:
            normalized = Email(email)
        except PydanticValidationError:
            raise InvalidCredentialsError()

        with logfire.span("auth_service.authenticate", email=normalized.root):
            user = await self.user_service.get_user_by_email(normalized)
            if user is None:
                raise InvalidCredentialsError()

            try:
                matches = verify_password(password, user.password_hash)
            except PasswordHashError as e:
                logfire.error(
                    "Stored password hash is unusable",
                    user_id=str(user.id),
                    error=str(e),
                )
                raise InvalidCredentialsError() from e

            if not matches:
                logfire.info("Login rejected - wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            return user


def _parse_email(email: str) -> Email:
    if not email:
        raise ValidationError("Email and password are required")
    try:
        return Email(email)
    except PydanticValidationError:
        raise ValidationError("Email must be a valid address")


def _check_password(password: str) -> None:
    if not password:
        raise ValidationError("Email and password are required")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
        )
