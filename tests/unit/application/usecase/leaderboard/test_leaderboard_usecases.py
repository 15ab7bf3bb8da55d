"""Unit tests for the leaderboard use cases."""

from datetime import timedelta

from dishka import AsyncContainer
import pytest

from cardiac.application.usecase.leaderboard import (
    GetTimeBasedVotesUseCase,
    GetVoteTotalsUseCase,
)
from cardiac.domain.repository import UserRepository
from cardiac.domain.service import VotingService
from cardiac.domain.value import CoinId, VoteWindow
from cardiac.util.clock import Clock
from tests.conftest import register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLeaderboardUseCases:
    """Tests for GetVoteTotalsUseCase and GetTimeBasedVotesUseCase."""

    @pytest.mark.asyncio
    async def test_totals_and_time_based(self, unit_env: AsyncContainer):
        # Arrange
        voting_service = await unit_env.get(VotingService)
        clock = await unit_env.get(Clock)
        totals = await unit_env.get(GetVoteTotalsUseCase)
        time_based = await unit_env.get(GetTimeBasedVotesUseCase)
        user_id = (await register_user(await unit_env.get(UserRepository))).id

        clock.advance(timedelta(days=-10))
        await voting_service.cast_vote(user_id, CoinId("bitcoin"), "Bitcoin")
        clock.advance(timedelta(days=10))
        await voting_service.cast_vote(user_id, CoinId("bitcoin"), "Bitcoin")
        await voting_service.cast_vote(user_id, CoinId("ethereum"), "Ethereum")

        # Act
        all_time = await totals.execute()
        today = await totals.execute(VoteWindow.TODAY)
        windows = await time_based.execute()

        # Assert
        assert all_time.root == {"bitcoin": 2, "ethereum": 1}
        assert today.root == {"bitcoin": 1, "ethereum": 1}
        assert windows.model_dump() == {
            "bitcoin": {"votes_24h": 1, "votes_7d": 1, "votes_3m": 2},
            "ethereum": {"votes_24h": 1, "votes_7d": 1, "votes_3m": 1},
        }

    @pytest.mark.asyncio
    async def test_no_votes(self, unit_env: AsyncContainer):
        totals = await unit_env.get(GetVoteTotalsUseCase)
        time_based = await unit_env.get(GetTimeBasedVotesUseCase)

        assert (await totals.execute()).root == {}
        assert (await time_based.execute()).root == {}
