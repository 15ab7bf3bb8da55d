"""PostgreSQL unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from cardiac.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work backed by a SAVEPOINT on the request session.

    The outer request transaction is still committed (or rolled back) by the
    session provider. The savepoint lets a block of writes be undone on its
    own, so a rejected write does not poison the rest of the request.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        savepoint = await self.session.begin_nested()
        try:
            yield
        except Exception as e:
            logfire.info("Savepoint rolled back", error=str(e))
            await savepoint.rollback()
            raise
        else:
            await savepoint.commit()
