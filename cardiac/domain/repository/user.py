"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from cardiac.domain.model.user import User
from cardiac.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: Normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If another user already has this email
        """
        pass

    @abstractmethod
    async def increment_share_points(self, user_id: UserId) -> Optional[int]:
        """Atomically add one share point.

        Args:
            user_id: The user's unique identifier

        Returns:
            The new total, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def rebuild_share_points(self) -> int:
        """Set every user's share points to their share log count.

        Runs as a single statement, so awards committed concurrently are
        either counted or applied on top of the rebuilt value.

        Returns:
            Number of users updated
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count registered users."""
        pass
