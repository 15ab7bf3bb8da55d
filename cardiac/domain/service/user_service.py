"""User domain service."""

import logfire

from cardiac.domain.error import NotFoundError
from cardiac.domain.model import User
from cardiac.domain.repository import UserRepository
from cardiac.domain.value import Email, UserId


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: Normalized email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", email=email.root, user_id=str(user.id))
            else:
                logfire.info("User not found", email=email.root)
            return user

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Raises:
            IntegrityError: If the email is already taken
        """
        with logfire.span("user_service.save", user_id=str(user.id)):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved

    async def count(self) -> int:
        """Count registered users."""
        return await self.user_repository.count()
