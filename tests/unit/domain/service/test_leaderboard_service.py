"""Unit tests for LeaderboardService."""

from datetime import datetime, timedelta
from uuid import uuid4

from dishka import AsyncContainer
import pytest

from cardiac.domain.model import Vote
from cardiac.domain.repository import UserRepository, VoteRepository
from cardiac.domain.service import DayBoundary, LeaderboardService, VotingService
from cardiac.domain.value import CoinId, UserId, VoteId, VoteWindow
from cardiac.util.clock import Clock
from tests.conftest import ny, register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

NOW = ny(2025, 6, 15, 12)


async def record_vote(
    vote_repo: VoteRepository,
    day_boundary: DayBoundary,
    coin_id: str,
    created_at: datetime,
    user_id: UserId | None = None,
    coin_name: str | None = None,
) -> Vote:
    """Write a vote straight to the ledger, bypassing eligibility."""
    return await vote_repo.save(
        Vote(
            id=VoteId(uuid4()),
            user_id=user_id or UserId(uuid4()),
            coin_id=CoinId(coin_id),
            coin_name=coin_name or coin_id.title(),
            created_at=created_at,
            vote_day=day_boundary.calendar_date_of(created_at),
            eligibility_key=coin_id,
        )
    )


class TestWindows:
    """Tests for windowed counts."""

    @pytest.mark.asyncio
    async def test_votes_at_2h_8d_and_100d_ago(self, unit_env: AsyncContainer):
        """Each window counts only the votes inside it."""
        # Arrange
        clock = await unit_env.get(Clock)
        clock.set(NOW)
        vote_repo = await unit_env.get(VoteRepository)
        day_boundary = await unit_env.get(DayBoundary)
        leaderboard = await unit_env.get(LeaderboardService)
        user_id = UserId(uuid4())

        for age in (timedelta(hours=2), timedelta(days=8), timedelta(days=100)):
            await record_vote(
                vote_repo, day_boundary, "bitcoin", NOW - age, user_id=user_id
            )

        # Act
        today = await leaderboard.windowed_votes_by_coin(VoteWindow.TODAY)
        last_24h = await leaderboard.windowed_votes_by_coin(VoteWindow.LAST_24_HOURS)
        week = await leaderboard.windowed_votes_by_coin(VoteWindow.LAST_7_DAYS)
        quarter = await leaderboard.windowed_votes_by_coin(VoteWindow.LAST_90_DAYS)
        all_time = await leaderboard.total_votes_by_coin()

        # Assert
        assert today == {"bitcoin": 1}
        assert last_24h == {"bitcoin": 1}
        assert week == {"bitcoin": 1}
        assert quarter == {"bitcoin": 2}
        assert all_time == {"bitcoin": 3}

    @pytest.mark.asyncio
    async def test_today_window_follows_calendar_day_not_24_hours(
        self, unit_env: AsyncContainer
    ):
        """A vote from yesterday evening is in the last 24h but not today."""
        # Arrange
        clock = await unit_env.get(Clock)
        clock.set(ny(2025, 6, 15, 1))
        vote_repo = await unit_env.get(VoteRepository)
        day_boundary = await unit_env.get(DayBoundary)
        leaderboard = await unit_env.get(LeaderboardService)

        await record_vote(vote_repo, day_boundary, "ethereum", ny(2025, 6, 14, 22))

        # Act
        today = await leaderboard.windowed_votes_by_coin(VoteWindow.TODAY)
        last_24h = await leaderboard.windowed_votes_by_coin(VoteWindow.LAST_24_HOURS)

        # Assert
        assert today == {}
        assert last_24h == {"ethereum": 1}

    @pytest.mark.asyncio
    async def test_time_based_votes_fills_missing_windows_with_zero(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        clock = await unit_env.get(Clock)
        clock.set(NOW)
        vote_repo = await unit_env.get(VoteRepository)
        day_boundary = await unit_env.get(DayBoundary)
        leaderboard = await unit_env.get(LeaderboardService)

        await record_vote(vote_repo, day_boundary, "bitcoin", NOW - timedelta(hours=1))
        await record_vote(vote_repo, day_boundary, "solana", NOW - timedelta(days=30))
        await record_vote(vote_repo, day_boundary, "dogecoin", NOW - timedelta(days=400))

        # Act
        result = await leaderboard.time_based_votes()

        # Assert
        assert list(result) == ["bitcoin", "solana"]
        assert result["bitcoin"].votes_24h == 1
        assert result["bitcoin"].votes_7d == 1
        assert result["bitcoin"].votes_3m == 1
        assert result["solana"].votes_24h == 0
        assert result["solana"].votes_7d == 0
        assert result["solana"].votes_3m == 1


class TestTallies:
    """Tests for ordering and top coins."""

    @pytest.mark.asyncio
    async def test_ties_are_ordered_by_coin_id(self, unit_env: AsyncContainer):
        # Arrange
        clock = await unit_env.get(Clock)
        clock.set(NOW)
        vote_repo = await unit_env.get(VoteRepository)
        day_boundary = await unit_env.get(DayBoundary)
        leaderboard = await unit_env.get(LeaderboardService)

        for coin_id in ("ethereum", "ethereum", "bitcoin", "bitcoin", "aave"):
            await record_vote(vote_repo, day_boundary, coin_id, NOW)

        # Act
        tallies = await leaderboard.tallies()
        top = await leaderboard.top_coin()

        # Assert
        assert [(t.coin_id, t.count) for t in tallies] == [
            ("bitcoin", 2),
            ("ethereum", 2),
            ("aave", 1),
        ]
        assert top.coin_id == "bitcoin"
        assert top.coin_name == "Bitcoin"

    @pytest.mark.asyncio
    async def test_top_coin_is_none_without_votes(self, unit_env: AsyncContainer):
        leaderboard = await unit_env.get(LeaderboardService)

        assert await leaderboard.top_coin(VoteWindow.LAST_24_HOURS) is None
        assert await leaderboard.total_votes() == 0

    @pytest.mark.asyncio
    async def test_top_coin_24h_ignores_older_votes(self, unit_env: AsyncContainer):
        clock = await unit_env.get(Clock)
        clock.set(NOW)
        vote_repo = await unit_env.get(VoteRepository)
        day_boundary = await unit_env.get(DayBoundary)
        leaderboard = await unit_env.get(LeaderboardService)

        for _ in range(3):
            await record_vote(vote_repo, day_boundary, "bitcoin", NOW - timedelta(days=3))
        await record_vote(vote_repo, day_boundary, "solana", NOW - timedelta(hours=3))

        assert (await leaderboard.top_coin(VoteWindow.ALL_TIME)).coin_id == "bitcoin"
        assert (await leaderboard.top_coin(VoteWindow.LAST_24_HOURS)).coin_id == "solana"
        assert await leaderboard.total_votes() == 4


class TestVotingHistory:
    """Tests for voting_history."""

    @pytest.mark.asyncio
    async def test_latest_vote_per_coin_newest_first(self, unit_env: AsyncContainer):
        # Arrange
        clock = await unit_env.get(Clock)
        voting_service = await unit_env.get(VotingService)
        leaderboard = await unit_env.get(LeaderboardService)
        user_id = (await register_user(await unit_env.get(UserRepository))).id

        clock.set(ny(2025, 6, 10, 9))
        await voting_service.cast_vote(user_id, CoinId("bitcoin"), "Bitcoin")
        clock.set(ny(2025, 6, 11, 9))
        await voting_service.cast_vote(user_id, CoinId("ethereum"), "Ethereum")
        clock.set(ny(2025, 6, 12, 9))
        latest_bitcoin = await voting_service.cast_vote(
            user_id, CoinId("bitcoin"), "Bitcoin"
        )

        # Act
        history = await leaderboard.voting_history(user_id)

        # Assert
        assert [vote.coin_id for vote in history] == ["bitcoin", "ethereum"]
        assert history[0].created_at == latest_bitcoin.vote.created_at

    @pytest.mark.asyncio
    async def test_history_is_per_user(self, unit_env: AsyncContainer):
        voting_service = await unit_env.get(VotingService)
        leaderboard = await unit_env.get(LeaderboardService)
        voter = await register_user(await unit_env.get(UserRepository))

        await voting_service.cast_vote(voter.id, CoinId("bitcoin"), "Bitcoin")

        assert await leaderboard.voting_history(UserId(uuid4())) == []
