"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4
from zoneinfo import ZoneInfo

from cardiac.domain.model import User
from cardiac.domain.repository import UserRepository
from cardiac.domain.value import Email, UserId

NEW_YORK = ZoneInfo("America/New_York")


def make_user(email: str = "alice@example.com", share_points: int = 0) -> User:
    """Build a user with an unusable password hash.

    For tests that never log in; use AuthService.signup when the password
    matters.
    """
    return User(
        id=UserId(uuid4()),
        email=Email(email),
        password_hash="$2b$04$" + "x" * 53,
        share_points=share_points,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


def ny(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> datetime:
    """An America/New_York wall-clock instant."""
    return datetime(year, month, day, hour, minute, second, tzinfo=NEW_YORK)


async def register_user(
    user_repository: UserRepository, share_points: int = 0
) -> User:
    """Save a user with a unique email."""
    return await user_repository.save(
        make_user(f"{uuid4().hex}@example.com", share_points=share_points)
    )
