"""In-memory vote repository for testing."""

from collections import Counter
from datetime import date, datetime
from typing import List, Optional

from cardiac.domain.model.vote import Vote
from cardiac.domain.repository.constraint import UNIQUE_DAILY_VOTE
from cardiac.domain.repository.vote import VoteRepository
from cardiac.domain.value import CoinId, CoinTally, UserId

from .store import InMemoryDatabase, unique_violation


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def save(self, vote: Vote) -> Vote:
        """Append a vote.

        Raises:
            IntegrityError: If (user, eligibility key, vote day) is taken
        """
        for existing in self._db.votes:
            if (
                existing.user_id == vote.user_id
                and existing.eligibility_key == vote.eligibility_key
                and existing.vote_day == vote.vote_day
            ):
                raise unique_violation("INSERT INTO votes", UNIQUE_DAILY_VOTE)

        self._db.votes.append(vote)
        self._db.on_rollback(lambda: self._db.votes.remove(vote))
        return vote

    async def find_latest(
        self, user_id: UserId, eligibility_key: str
    ) -> Optional[Vote]:
        matches = [
            v
            for v in self._db.votes
            if v.user_id == user_id and v.eligibility_key == eligibility_key
        ]
        return max(matches, key=lambda v: v.created_at, default=None)

    async def find_by_user_on_day(self, user_id: UserId, day: date) -> List[Vote]:
        votes = [
            v for v in self._db.votes if v.user_id == user_id and v.vote_day == day
        ]
        return sorted(votes, key=lambda v: v.created_at)

    async def find_latest_per_coin(self, user_id: UserId) -> List[Vote]:
        latest: dict[CoinId, Vote] = {}
        for vote in self._db.votes:
            if vote.user_id != user_id:
                continue
            current = latest.get(vote.coin_id)
            if current is None or vote.created_at > current.created_at:
                latest[vote.coin_id] = vote
        return sorted(latest.values(), key=lambda v: v.created_at, reverse=True)

    async def tally_by_coin(
        self,
        since: Optional[datetime] = None,
        day: Optional[date] = None,
    ) -> List[CoinTally]:
        counts: Counter[CoinId] = Counter()
        names: dict[CoinId, str] = {}
        for vote in self._db.votes:
            if since is not None and vote.created_at < since:
                continue
            if day is not None and vote.vote_day != day:
                continue
            counts[vote.coin_id] += 1
            names[vote.coin_id] = max(names.get(vote.coin_id, ""), vote.coin_name)

        ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [
            CoinTally(coin_id=coin_id, coin_name=names[coin_id], count=count)
            for coin_id, count in ordered
        ]

    async def count_for_coin(self, coin_id: CoinId) -> int:
        return sum(1 for v in self._db.votes if v.coin_id == coin_id)

    async def count(self) -> int:
        return len(self._db.votes)
