"""In-memory user repository for testing."""

from collections import Counter
from typing import Optional

from cardiac.domain.model.user import User
from cardiac.domain.repository.constraint import UNIQUE_USER_EMAIL
from cardiac.domain.repository.user import UserRepository
from cardiac.domain.value import Email, UserId

from .store import InMemoryDatabase, unique_violation


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._db.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        return self._owner_of(email)

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has this email
        """
        existing = self._owner_of(user.email)
        if existing and existing.id != user.id:
            raise unique_violation("INSERT INTO users", UNIQUE_USER_EMAIL)

        previous = self._db.users.get(user.id)
        self._db.users[user.id] = user
        self._db.on_rollback(lambda: self._put_back(user.id, previous))
        return user

    async def increment_share_points(self, user_id: UserId) -> Optional[int]:
        """Add one share point."""
        new_total = self._add_points(user_id, 1)
        if new_total is not None:
            self._db.on_rollback(lambda: self._add_points(user_id, -1))
        return new_total

    async def rebuild_share_points(self) -> int:
        """Set every user's share points to their share log count."""
        counts = Counter(entry.user_id for entry in self._db.share_logs)
        for user_id, user in list(self._db.users.items()):
            delta = counts.get(user_id, 0) - user.share_points
            self._add_points(user_id, delta)
            self._db.on_rollback(
                lambda user_id=user_id, delta=delta: self._add_points(user_id, -delta)
            )
        return len(self._db.users)

    async def count(self) -> int:
        return len(self._db.users)

    def _add_points(self, user_id: UserId, delta: int) -> Optional[int]:
        user = self._db.users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={"share_points": user.share_points + delta})
        self._db.users[user_id] = updated
        return updated.share_points

    def _owner_of(self, email: Email) -> Optional[User]:
        for user in self._db.users.values():
            if user.email == email:
                return user
        return None

    def _put_back(self, user_id: UserId, previous: Optional[User]) -> None:
        if previous is None:
            self._db.users.pop(user_id, None)
        else:
            self._db.users[user_id] = previous
