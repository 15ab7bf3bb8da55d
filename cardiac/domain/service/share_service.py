"""Share points domain service."""

from dataclasses import dataclass
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from cardiac.domain.error import AlreadyAwardedTodayError, NotFoundError
from cardiac.domain.model.share_log import ShareLog
from cardiac.domain.repository import ShareLogRepository, UnitOfWork, UserRepository
from cardiac.domain.repository.constraint import UNIQUE_DAILY_SHARE, is_violation_of
from cardiac.domain.value import CoinId, ShareLogId, UserId

from .base import Service
from .day_boundary import DayBoundary


@dataclass
class ShareAward:
    """Outcome of an accepted share award."""

    share_log: ShareLog
    new_total: int


class ShareService(Service):
    """Awards one share point per (user, coin) per reference day.

    The ledger (share_logs) and the denormalized counter (users.share_points)
    are written in one transaction. recompute_share_points rebuilds the
    counter from the ledger if the two ever drift.
    """

    def __init__(
        self,
        share_log_repository: ShareLogRepository,
        user_repository: UserRepository,
        day_boundary: DayBoundary,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize share service.

        Args:
            share_log_repository: Share award ledger
            user_repository: User repository holding the points counter
            day_boundary: Reference-timezone day boundary
            unit_of_work: Transaction boundary for the two writes
        """
        self.share_log_repository = share_log_repository
        self.user_repository = user_repository
        self.day_boundary = day_boundary
        self.unit_of_work = unit_of_work

    async def award_share(self, user_id: UserId, coin_id: CoinId) -> ShareAward:
        """Award a share point.

        Args:
            user_id: Sharing user
            coin_id: Shared coin

        Returns:
            The ledger entry and the user's new share_points total

        Raises:
            NotFoundError: If the user does not exist
            AlreadyAwardedTodayError: If the user was already awarded for
                this coin today
        """
        with logfire.span(
            "share_service.award_share", user_id=str(user_id), coin_id=coin_id
        ):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Share award for unknown user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            today = self.day_boundary.today()
            existing = await self.share_log_repository.find_by_user_coin_day(
                user_id, coin_id, today
            )
            if existing is not None:
                logfire.info(
                    "Share award rejected - already awarded today",
                    user_id=str(user_id),
                    coin_id=coin_id,
                )
                raise AlreadyAwardedTodayError(
                    coin_id, self.day_boundary.time_until_next_midnight()
                )

            share_log = ShareLog(
                id=ShareLogId(uuid4()),
                user_id=user_id,
                coin_id=coin_id,
                created_at=self.day_boundary.now(),
                share_day=today,
            )

            try:
                async with self.unit_of_work.transaction():
                    saved = await self.share_log_repository.save(share_log)
                    new_total = await self.user_repository.increment_share_points(
                        user_id
                    )
                    if new_total is None:
                        raise NotFoundError("User", str(user_id))
            except IntegrityError as e:
                if not is_violation_of(e, UNIQUE_DAILY_SHARE):
                    logfire.error(
                        "Share award insert failed",
                        user_id=str(user_id),
                        coin_id=coin_id,
                    )
                    raise
                logfire.warn(
                    "Concurrent duplicate share award rejected",
                    user_id=str(user_id),
                    coin_id=coin_id,
                )
                raise AlreadyAwardedTodayError(
                    coin_id, self.day_boundary.time_until_next_midnight()
                )

            logfire.info(
                "Share point awarded",
                user_id=str(user_id),
                coin_id=coin_id,
                new_total=new_total,
            )
            return ShareAward(share_log=saved, new_total=new_total)

    async def recompute_share_points(self) -> int:
        """Rebuild every user's share_points from the share ledger.

        Users without ledger entries are reset to 0. Idempotent. The rebuild
        is one UPDATE, so an award committed while it runs is either counted
        or increments the rebuilt value.

        Returns:
            Number of users updated
        """
        with logfire.span("share_service.recompute_share_points"):
            async with self.unit_of_work.transaction():
                updated = await self.user_repository.rebuild_share_points()

            logfire.info("Share points recomputed", users=updated)
            return updated
