"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cardiac.domain.model import User
from cardiac.domain.repository import UserRepository
from cardiac.domain.value import Email, UserId
from cardiac.persistence.mappers import row_to_user, user_to_dict
from cardiac.persistence.tables import share_logs_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (normalized) email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If another user already has this email
        """
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = insert(users_table).values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def increment_share_points(self, user_id: UserId) -> Optional[int]:
        """Atomically add one share point and return the new total."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(share_points=func.coalesce(users_table.c.share_points, 0) + 1)
            .returning(users_table.c.share_points)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def rebuild_share_points(self) -> int:
        """Set every user's share points to their share log count."""
        logged = (
            select(func.count())
            .select_from(share_logs_table)
            .where(share_logs_table.c.user_id == users_table.c.id)
            .scalar_subquery()
        )
        result = await self.session.execute(
            update(users_table).values(share_points=logged)
        )
        await self.session.flush()
        return result.rowcount

    async def count(self) -> int:
        """Count registered users."""
        stmt = select(func.count()).select_from(users_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()
