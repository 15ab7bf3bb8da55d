"""Integration tests for the PostgreSQL repositories.

Require a migrated database reachable through DATABASE__URL.
"""

from datetime import date, datetime, timezone
import os
from uuid import uuid4

from dishka import AsyncContainer
import pytest
from sqlalchemy.exc import IntegrityError

from cardiac.domain.model import ShareLog, Vote
from cardiac.domain.repository import (
    ShareLogRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from cardiac.domain.repository.constraint import UNIQUE_DAILY_VOTE, is_violation_of
from cardiac.domain.value import CoinId, ShareLogId, VoteId
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

VOTED_AT = datetime(2025, 1, 15, 17, 0, tzinfo=timezone.utc)


def make_vote(user_id, coin_id: str = "bitcoin", created_at: datetime = VOTED_AT):
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        coin_id=CoinId(coin_id),
        coin_name=coin_id.title(),
        created_at=created_at,
        vote_day=date(2025, 1, 15),
        eligibility_key=coin_id,
    )


class TestPostgresVoteRepository:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_latest(self, integration_env: AsyncContainer):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        vote_repo = await integration_env.get(VoteRepository)
        user = await user_repo.save(make_user(f"{uuid4().hex}@example.com"))

        # Act
        saved = await vote_repo.save(make_vote(user.id))
        latest = await vote_repo.find_latest(user.id, "bitcoin")
        today = await vote_repo.find_by_user_on_day(user.id, date(2025, 1, 15))

        # Assert
        assert latest == saved
        assert latest.created_at.tzinfo is not None
        assert [v.id for v in today] == [saved.id]

    @pytest.mark.asyncio
    async def test_second_vote_same_day_violates_constraint(
        self, integration_env: AsyncContainer
    ):
        user_repo = await integration_env.get(UserRepository)
        vote_repo = await integration_env.get(VoteRepository)
        unit_of_work = await integration_env.get(UnitOfWork)
        user = await user_repo.save(make_user(f"{uuid4().hex}@example.com"))
        await vote_repo.save(make_vote(user.id))

        with pytest.raises(IntegrityError) as exc_info:
            async with unit_of_work.transaction():
                await vote_repo.save(make_vote(user.id))

        assert is_violation_of(exc_info.value, UNIQUE_DAILY_VOTE)
        # The savepoint keeps the session usable
        assert await vote_repo.find_latest(user.id, "bitcoin") is not None


class TestPostgresShareLogRepository:
    """Integration tests for PostgresShareLogRepository and share points."""

    @pytest.mark.asyncio
    async def test_share_log_and_points(self, integration_env: AsyncContainer):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        share_repo = await integration_env.get(ShareLogRepository)
        user = await user_repo.save(make_user(f"{uuid4().hex}@example.com"))

        # Act
        await share_repo.save(
            ShareLog(
                id=ShareLogId(uuid4()),
                user_id=user.id,
                coin_id=CoinId("bitcoin"),
                created_at=VOTED_AT,
                share_day=date(2025, 1, 15),
            )
        )
        points = await user_repo.increment_share_points(user.id)
        found = await share_repo.find_by_user_coin_day(
            user.id, CoinId("bitcoin"), date(2025, 1, 15)
        )
        await user_repo.save(user.model_copy(update={"share_points": 5}))
        await user_repo.rebuild_share_points()

        # Assert
        assert points == 1
        assert found is not None
        assert (await user_repo.find_by_id(user.id)).share_points == 1

    @pytest.mark.asyncio
    async def test_increment_unknown_user(self, integration_env: AsyncContainer):
        user_repo = await integration_env.get(UserRepository)

        assert await user_repo.increment_share_points(uuid4()) is None
