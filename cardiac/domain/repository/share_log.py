"""Share log repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from cardiac.domain.model.share_log import ShareLog
from cardiac.domain.value import CoinId, UserId


class ShareLogRepository(ABC):
    """Append-only ledger of share point awards."""

    @abstractmethod
    async def save(self, share_log: ShareLog) -> ShareLog:
        """Append a share log entry.

        Raises:
            IntegrityError: If the user already has an entry for this coin
                on the same share_day
        """
        pass

    @abstractmethod
    async def find_by_user_coin_day(
        self, user_id: UserId, coin_id: CoinId, day: date
    ) -> Optional[ShareLog]:
        """Find the user's award for a coin on a reference-timezone day."""
        pass
