"""In-memory share log repository for testing."""

from datetime import date
from typing import Optional

from cardiac.domain.model.share_log import ShareLog
from cardiac.domain.repository.constraint import UNIQUE_DAILY_SHARE
from cardiac.domain.repository.share_log import ShareLogRepository
from cardiac.domain.value import CoinId, UserId

from .store import InMemoryDatabase, unique_violation


class InMemoryShareLogRepository(ShareLogRepository):
    """In-memory implementation of ShareLogRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def save(self, share_log: ShareLog) -> ShareLog:
        """Append a share log entry.

        Raises:
            IntegrityError: If (user, coin, share day) is taken
        """
        existing = self._entry_for(
            share_log.user_id, share_log.coin_id, share_log.share_day
        )
        if existing:
            raise unique_violation("INSERT INTO share_logs", UNIQUE_DAILY_SHARE)

        self._db.share_logs.append(share_log)
        self._db.on_rollback(lambda: self._db.share_logs.remove(share_log))
        return share_log

    async def find_by_user_coin_day(
        self, user_id: UserId, coin_id: CoinId, day: date
    ) -> Optional[ShareLog]:
        return self._entry_for(user_id, coin_id, day)

    def _entry_for(
        self, user_id: UserId, coin_id: CoinId, day: date
    ) -> Optional[ShareLog]:
        for entry in self._db.share_logs:
            if (
                entry.user_id == user_id
                and entry.coin_id == coin_id
                and entry.share_day == day
            ):
                return entry
        return None
