"""Unit tests for AuthService."""

from dishka import AsyncContainer
import pytest
from sqlalchemy.exc import IntegrityError

from cardiac.adapter.turnstile import MockTurnstileVerifier
from cardiac.domain.error import (
    CaptchaVerificationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    ValidationError,
)
from cardiac.domain.repository import UnitOfWork, UserRepository
from cardiac.domain.service import AuthService, CaptchaVerifier, UserService
from cardiac.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from cardiac.util.clock import Clock, FixedClock
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

PASSWORD = "correct horse battery staple"


def signup_service(
    user_repository: UserRepository, db: InMemoryDatabase
) -> AuthService:
    return AuthService(
        user_service=UserService(user_repository),
        captcha_verifier=MockTurnstileVerifier(),
        unit_of_work=InMemoryUnitOfWork(db),
        clock=FixedClock(),
        captcha_required=False,
        bcrypt_rounds=4,
    )


class TestSignup:
    """Tests for signup."""

    @pytest.mark.asyncio
    async def test_signup_creates_user_with_zero_points(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        clock = await unit_env.get(Clock)

        # Act
        user = await auth_service.signup(
            "  Alice@Example.COM ", PASSWORD, captcha_token="ok"
        )

        # Assert
        assert user.email.root == "alice@example.com"
        assert user.share_points == 0
        assert user.created_at == clock.now()
        assert user.password_hash != PASSWORD
        assert user.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        await auth_service.signup("alice@example.com", PASSWORD, captcha_token="ok")

        with pytest.raises(EmailAlreadyRegisteredError, match="User already exists"):
            await auth_service.signup(
                "ALICE@example.com", "another password", captcha_token="ok"
            )

    @pytest.mark.asyncio
    async def test_racing_signup_caught_by_unique_email(self):
        """A signup that missed the other's row still gets the business error."""

        class StaleReadUserRepository(InMemoryUserRepository):
            async def find_by_email(self, email):
                return None

        # Arrange
        db = InMemoryDatabase()
        auth_service = signup_service(StaleReadUserRepository(db), db)
        await auth_service.signup("alice@example.com", PASSWORD)

        # Act & Assert
        with pytest.raises(EmailAlreadyRegisteredError):
            await auth_service.signup("alice@example.com", PASSWORD)

        assert len(db.users) == 1

    @pytest.mark.asyncio
    async def test_other_integrity_errors_propagate(self):
        class CheckFailingUserRepository(InMemoryUserRepository):
            async def save(self, user):
                raise IntegrityError(
                    "INSERT INTO users",
                    None,
                    Exception(
                        'new row for relation "users" violates check constraint '
                        '"ck_users_share_points_non_negative"'
                    ),
                )

        # Arrange
        db = InMemoryDatabase()
        auth_service = signup_service(CheckFailingUserRepository(db), db)

        # Act & Assert
        with pytest.raises(IntegrityError):
            await auth_service.signup("alice@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_rejected_captcha(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)

        with pytest.raises(CaptchaVerificationError, match="Please try again"):
            await auth_service.signup(
                "alice@example.com", PASSWORD, captcha_token="invalid"
            )

        assert await user_repo.count() == 0

    @pytest.mark.asyncio
    async def test_missing_captcha(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(CaptchaVerificationError):
            await auth_service.signup("alice@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_captcha_not_needed_when_disabled(self, unit_env: AsyncContainer):
        auth_service = AuthService(
            user_service=await unit_env.get(UserService),
            captcha_verifier=await unit_env.get(CaptchaVerifier),
            unit_of_work=await unit_env.get(UnitOfWork),
            clock=await unit_env.get(Clock),
            captcha_required=False,
            bcrypt_rounds=4,
        )

        user = await auth_service.signup("bob@example.com", PASSWORD)

        assert user.email.root == "bob@example.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email, password",
        [
            ("", PASSWORD),
            ("alice@example.com", ""),
            ("not-an-email", PASSWORD),
            ("alice@example.com", "x" * 73),
        ],
    )
    async def test_invalid_input_rejected(
        self, unit_env: AsyncContainer, email: str, password: str
    ):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            await auth_service.signup(email, password, captcha_token="ok")


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_password(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        created = await auth_service.signup(
            "alice@example.com", PASSWORD, captcha_token="ok"
        )

        user = await auth_service.authenticate("Alice@example.com", PASSWORD)

        assert user.id == created.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        await auth_service.signup("alice@example.com", PASSWORD, captcha_token="ok")

        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            await auth_service.authenticate("alice@example.com", "wrong password")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["nobody@example.com", "not-an-email"])
    async def test_unknown_account(self, unit_env: AsyncContainer, email: str):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(InvalidCredentialsError):
            await auth_service.authenticate(email, PASSWORD)
