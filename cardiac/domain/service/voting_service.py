"""Voting domain service."""

from dataclasses import dataclass
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from cardiac.domain.error import AlreadyVotedTodayError, NotFoundError
from cardiac.domain.model.vote import Vote
from cardiac.domain.repository import UnitOfWork, UserRepository, VoteRepository
from cardiac.domain.repository.constraint import UNIQUE_DAILY_VOTE, is_violation_of
from cardiac.domain.value import CoinId, UserId, VoteEligibility, VoteId, VotingScope

from .base import Service
from .day_boundary import DayBoundary


@dataclass
class VoteReceipt:
    """Outcome of an accepted vote."""

    vote: Vote
    coin_total: int


class VotingService(Service):
    """Daily vote eligibility and vote casting.

    A user may vote once per eligibility key per reference-timezone day. The
    key is the coin id under the per-coin scope and a single shared key under
    the global scope.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        user_repository: UserRepository,
        day_boundary: DayBoundary,
        unit_of_work: UnitOfWork,
        scope: VotingScope = VotingScope.PER_COIN,
    ) -> None:
        """Initialize voting service.

        Args:
            vote_repository: Vote ledger
            user_repository: Registered voters
            day_boundary: Reference-timezone day boundary
            unit_of_work: Transaction boundary for the ledger append
            scope: Voting scope (per coin or global)
        """
        self.vote_repository = vote_repository
        self.user_repository = user_repository
        self.day_boundary = day_boundary
        self.unit_of_work = unit_of_work
        self.scope = scope

    async def can_vote(self, user_id: UserId, coin_id: CoinId) -> VoteEligibility:
        """Decide whether the user may vote for the coin now.

        Read-only: calling it any number of times never changes its answer.

        Args:
            user_id: Voter
            coin_id: Coin to vote for

        Returns:
            Eligibility, with the time left until the reset when not eligible
        """
        with logfire.span(
            "voting_service.can_vote", user_id=str(user_id), coin_id=coin_id
        ):
            latest = await self.vote_repository.find_latest(
                user_id, self.scope.eligibility_key(coin_id)
            )
            if latest is None:
                return VoteEligibility(eligible=True)

            today = self.day_boundary.today()
            if self.day_boundary.calendar_date_of(latest.created_at) != today:
                return VoteEligibility(eligible=True)

            return VoteEligibility(
                eligible=False,
                remaining=self.day_boundary.time_until_next_midnight(),
                last_voted_at=latest.created_at,
            )

    async def cast_vote(
        self, user_id: UserId, coin_id: CoinId, coin_name: str
    ) -> VoteReceipt:
        """Cast a vote.

        Eligibility is checked again here, never trusted from an earlier read.
        Two concurrent casts that both pass the check are settled by the
        ledger's unique constraint: the second insert fails and is reported
        as AlreadyVotedTodayError.

        Args:
            user_id: Voter
            coin_id: Coin voted for
            coin_name: Display name of the coin

        Returns:
            The recorded vote and the coin's new all-time total

        Raises:
            NotFoundError: If the voter is not a registered user
            AlreadyVotedTodayError: If the user already voted today
        """
        with logfire.span(
            "voting_service.cast_vote", user_id=str(user_id), coin_id=coin_id
        ):
            if await self.user_repository.find_by_id(user_id) is None:
                logfire.warn("Vote from unknown user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            eligibility = await self.can_vote(user_id, coin_id)
            if not eligibility.eligible:
                logfire.info(
                    "Vote rejected - already voted today",
                    user_id=str(user_id),
                    coin_id=coin_id,
                    remaining_ms=eligibility.remaining_ms,
                )
                raise AlreadyVotedTodayError(
                    coin_id, coin_name, eligibility.remaining
                )

            now = self.day_boundary.now()
            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                coin_id=coin_id,
                coin_name=coin_name,
                created_at=now,
                vote_day=self.day_boundary.calendar_date_of(now),
                eligibility_key=self.scope.eligibility_key(coin_id),
            )

            try:
                async with self.unit_of_work.transaction():
                    saved_vote = await self.vote_repository.save(vote)
            except IntegrityError as e:
                if not is_violation_of(e, UNIQUE_DAILY_VOTE):
                    logfire.error(
                        "Vote insert failed", user_id=str(user_id), coin_id=coin_id
                    )
                    raise
                logfire.warn(
                    "Concurrent duplicate vote rejected",
                    user_id=str(user_id),
                    coin_id=coin_id,
                )
                raise AlreadyVotedTodayError(
                    coin_id, coin_name, self.day_boundary.time_until_next_midnight()
                )

            coin_total = await self.vote_repository.count_for_coin(coin_id)
            logfire.info(
                "Vote cast",
                user_id=str(user_id),
                coin_id=coin_id,
                vote_day=vote.vote_day.isoformat(),
                coin_total=coin_total,
            )
            return VoteReceipt(vote=saved_vote, coin_total=coin_total)

    async def voted_today(self, user_id: UserId) -> list[Vote]:
        """List the votes the user cast on the current reference day.

        Args:
            user_id: Voter

        Returns:
            Today's votes, one per coin
        """
        with logfire.span("voting_service.voted_today", user_id=str(user_id)):
            return await self.vote_repository.find_by_user_on_day(
                user_id, self.day_boundary.today()
            )
