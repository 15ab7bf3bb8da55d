"""PostgreSQL implementation of ShareLog repository."""

from datetime import date
from typing import Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from cardiac.domain.model import ShareLog
from cardiac.domain.repository import ShareLogRepository
from cardiac.domain.value import CoinId, UserId
from cardiac.persistence.mappers import row_to_share_log, share_log_to_dict
from cardiac.persistence.tables import share_logs_table


class PostgresShareLogRepository(ShareLogRepository):
    """PostgreSQL implementation of ShareLogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, share_log: ShareLog) -> ShareLog:
        """Append a share log entry."""
        stmt = insert(share_logs_table).values(**share_log_to_dict(share_log))
        await self.session.execute(stmt)
        await self.session.flush()
        return share_log

    async def find_by_user_coin_day(
        self, user_id: UserId, coin_id: CoinId, day: date
    ) -> Optional[ShareLog]:
        stmt = select(share_logs_table).where(
            and_(
                share_logs_table.c.user_id == user_id,
                share_logs_table.c.coin_id == coin_id,
                share_logs_table.c.share_day == day,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_share_log(dict(row)) if row else None
