"""Unit tests for AwardShareUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from cardiac.application.usecase.share import AwardShareRequest, AwardShareUseCase
from cardiac.domain.error import (
    AlreadyAwardedTodayError,
    NotFoundError,
    ValidationError,
)
from cardiac.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAwardShareUseCase:
    """Tests for AwardShareUseCase."""

    @pytest.mark.asyncio
    async def test_award(self, unit_env: AsyncContainer):
        # Arrange
        use_case = await unit_env.get(AwardShareUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act
        response = await use_case.execute(
            AwardShareRequest(user_id=str(user.id), coin_id="bitcoin")
        )

        # Assert
        assert response.message == "Share points updated"
        assert response.share_points == 1

    @pytest.mark.asyncio
    async def test_award_twice(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(AwardShareUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        request = AwardShareRequest(user_id=str(user.id), coin_id="bitcoin")
        await use_case.execute(request)

        with pytest.raises(AlreadyAwardedTodayError):
            await use_case.execute(request)

        assert (await user_repo.find_by_id(user.id)).share_points == 1

    @pytest.mark.asyncio
    async def test_blank_coin(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(AwardShareUseCase)

        with pytest.raises(ValidationError, match="Coin ID is required"):
            await use_case.execute(
                AwardShareRequest(user_id=str(uuid4()), coin_id="  ")
            )

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(AwardShareUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AwardShareRequest(user_id=str(uuid4()), coin_id="bitcoin")
            )
