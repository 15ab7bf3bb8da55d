"""In-memory unit of work for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from cardiac.domain.repository import UnitOfWork

from .store import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """Undoes the writes made inside the block if the block raises.

    Only this task's writes are undone; rows other tasks wrote meanwhile
    are kept, as with a database savepoint.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        undo_log, token = self._db.begin()
        committed = False
        try:
            yield
            committed = True
        finally:
            self._db.end(undo_log, token, rollback=not committed)
