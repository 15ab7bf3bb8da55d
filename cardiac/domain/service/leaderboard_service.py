"""Leaderboard domain service.

Read-only rollups over the vote ledger. Nothing here writes.
"""

from dataclasses import dataclass

import logfire

from cardiac.domain.model.vote import Vote
from cardiac.domain.repository import VoteRepository
from cardiac.domain.value import CoinId, CoinTally, UserId, VoteWindow

from .base import Service
from .day_boundary import DayBoundary


@dataclass
class TimeBasedVotes:
    """Per-coin counts across the three leaderboard windows.

    votes_24h holds the current reference-day count, not a rolling 24 hours.
    """

    votes_24h: int = 0
    votes_7d: int = 0
    votes_3m: int = 0


class LeaderboardService(Service):
    """Vote tallies by coin and window."""

    def __init__(self, vote_repository: VoteRepository, day_boundary: DayBoundary):
        self.vote_repository = vote_repository
        self.day_boundary = day_boundary

    async def tallies(self, window: VoteWindow = VoteWindow.ALL_TIME) -> list[CoinTally]:
        """Vote tallies for a window, highest count first.

        Args:
            window: TODAY uses the reference calendar day; LAST_* windows are
                rolling from now

        Returns:
            Tallies ordered by count descending, then coin id ascending
        """
        with logfire.span("leaderboard_service.tallies", window=window.value):
            if window is VoteWindow.TODAY:
                return await self.vote_repository.tally_by_coin(
                    day=self.day_boundary.today()
                )

            span = window.rolling_span
            if span is None:
                return await self.vote_repository.tally_by_coin()

            return await self.vote_repository.tally_by_coin(
                since=self.day_boundary.now() - span
            )

    async def windowed_votes_by_coin(self, window: VoteWindow) -> dict[CoinId, int]:
        """Vote counts per coin within a window."""
        return {tally.coin_id: tally.count for tally in await self.tallies(window)}

    async def total_votes_by_coin(self) -> dict[CoinId, int]:
        """All-time vote counts per coin."""
        return await self.windowed_votes_by_coin(VoteWindow.ALL_TIME)

    async def time_based_votes(self) -> dict[CoinId, TimeBasedVotes]:
        """Today, 7-day and 90-day counts keyed by coin.

        Coins absent from a window get 0 for it.
        """
        with logfire.span("leaderboard_service.time_based_votes"):
            today = await self.windowed_votes_by_coin(VoteWindow.TODAY)
            week = await self.windowed_votes_by_coin(VoteWindow.LAST_7_DAYS)
            quarter = await self.windowed_votes_by_coin(VoteWindow.LAST_90_DAYS)

            result: dict[CoinId, TimeBasedVotes] = {}
            for coin_id in sorted(set(today) | set(week) | set(quarter)):
                result[coin_id] = TimeBasedVotes(
                    votes_24h=today.get(coin_id, 0),
                    votes_7d=week.get(coin_id, 0),
                    votes_3m=quarter.get(coin_id, 0),
                )

            logfire.info("Time based votes computed", coins=len(result))
            return result

    async def voting_history(self, user_id: UserId) -> list[Vote]:
        """The user's latest vote for each coin, newest first."""
        with logfire.span("leaderboard_service.voting_history", user_id=str(user_id)):
            return await self.vote_repository.find_latest_per_coin(user_id)

    async def top_coin(
        self, window: VoteWindow = VoteWindow.ALL_TIME
    ) -> CoinTally | None:
        """The most voted coin in a window, or None when nobody voted.

        Ties go to the lowest coin id.
        """
        tallies = await self.tallies(window)
        return tallies[0] if tallies else None

    async def total_votes(self) -> int:
        """Count of every vote in the ledger."""
        return await self.vote_repository.count()
