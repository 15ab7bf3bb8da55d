"""ShareLog entity.

Records that a user was awarded a share point for a coin. Structurally
parallel to Vote; one per (user, coin) per reference-timezone day.
"""

from datetime import date, datetime

from cardiac.domain.model.common import DomainModel
from cardiac.domain.value import CoinId, ShareLogId, UserId


class ShareLog(DomainModel):
    """Share award ledger entry."""

    id: ShareLogId
    user_id: UserId
    coin_id: CoinId
    created_at: datetime  # UTC
    share_day: date
