"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Transaction boundary spanning several repository writes.

    Usage:
        async with unit_of_work.transaction():
            await share_log_repository.save(entry)
            await user_repository.increment_share_points(user_id)

    Every write made inside the block becomes visible together when the
    block exits normally. If the block raises, all of them are undone and
    the exception propagates.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        pass
