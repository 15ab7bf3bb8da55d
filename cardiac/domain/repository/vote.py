"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Optional

from cardiac.domain.model.vote import Vote
from cardiac.domain.value import CoinId, CoinTally, UserId


class VoteRepository(ABC):
    """Append-only vote ledger.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Append a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already has a vote with the same
                eligibility key on the same vote_day
        """
        pass

    @abstractmethod
    async def find_latest(
        self, user_id: UserId, eligibility_key: str
    ) -> Optional[Vote]:
        """Find the user's most recent vote under an eligibility key.

        Args:
            user_id: The user's ID
            eligibility_key: Coin id, or "*" under the global voting scope

        Returns:
            The newest vote by created_at, or None
        """
        pass

    @abstractmethod
    async def find_by_user_on_day(self, user_id: UserId, day: date) -> List[Vote]:
        """Find every vote a user cast on a reference-timezone day."""
        pass

    @abstractmethod
    async def find_latest_per_coin(self, user_id: UserId) -> List[Vote]:
        """Find the user's latest vote for each coin they ever voted for.

        Returns:
            One vote per coin, newest first
        """
        pass

    @abstractmethod
    async def tally_by_coin(
        self,
        since: Optional[datetime] = None,
        day: Optional[date] = None,
    ) -> List[CoinTally]:
        """Count votes per coin.

        Args:
            since: Only count votes created at or after this instant
            day: Only count votes whose vote_day equals this date

        Returns:
            Tallies ordered by count descending, then coin id ascending
        """
        pass

    @abstractmethod
    async def count_for_coin(self, coin_id: CoinId) -> int:
        """Count all-time votes for one coin."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count every vote in the ledger."""
        pass
