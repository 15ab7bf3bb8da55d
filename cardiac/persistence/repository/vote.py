"""PostgreSQL implementation of Vote repository."""

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from cardiac.domain.model import Vote
from cardiac.domain.repository import VoteRepository
from cardiac.domain.value import CoinId, CoinTally, UserId
from cardiac.persistence.mappers import row_to_vote, vote_to_dict
from cardiac.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, vote: Vote) -> Vote:
        """Append a vote.

        Raises:
            IntegrityError: On uq_votes_user_key_day violation
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def find_latest(
        self, user_id: UserId, eligibility_key: str
    ) -> Optional[Vote]:
        """Find the user's newest vote under an eligibility key."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.user_id == user_id,
                    votes_table.c.eligibility_key == eligibility_key,
                )
            )
            .order_by(votes_table.c.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_user_on_day(self, user_id: UserId, day: date) -> List[Vote]:
        """Find every vote a user cast on a reference day."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.user_id == user_id,
                    votes_table.c.vote_day == day,
                )
            )
            .order_by(votes_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def find_latest_per_coin(self, user_id: UserId) -> List[Vote]:
        """Find the user's latest vote for each coin, newest first."""
        latest = (
            select(
                votes_table.c.coin_id,
                func.max(votes_table.c.created_at).label("max_created_at"),
            )
            .where(votes_table.c.user_id == user_id)
            .group_by(votes_table.c.coin_id)
            .subquery("latest")
        )
        stmt = (
            select(votes_table)
            .join(
                latest,
                and_(
                    votes_table.c.coin_id == latest.c.coin_id,
                    votes_table.c.created_at == latest.c.max_created_at,
                ),
            )
            .where(votes_table.c.user_id == user_id)
            .order_by(votes_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def tally_by_coin(
        self,
        since: Optional[datetime] = None,
        day: Optional[date] = None,
    ) -> List[CoinTally]:
        """Count votes per coin, highest first."""
        count = func.count().label("count")
        stmt = select(
            votes_table.c.coin_id,
            func.max(votes_table.c.coin_name).label("coin_name"),
            count,
        ).group_by(votes_table.c.coin_id)

        if since is not None:
            stmt = stmt.where(votes_table.c.created_at >= since)
        if day is not None:
            stmt = stmt.where(votes_table.c.vote_day == day)

        stmt = stmt.order_by(count.desc(), votes_table.c.coin_id.asc())
        result = await self.session.execute(stmt)
        return [
            CoinTally(
                coin_id=CoinId(row["coin_id"]),
                coin_name=row["coin_name"],
                count=row["count"],
            )
            for row in result.mappings().all()
        ]

    async def count_for_coin(self, coin_id: CoinId) -> int:
        """Count all-time votes for one coin."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.coin_id == coin_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count(self) -> int:
        """Count every vote."""
        stmt = select(func.count()).select_from(votes_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()
