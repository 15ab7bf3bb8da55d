"""Unit tests for ApiUsageCounter."""

import asyncio

import pytest

from cardiac.util.usage import ApiUsageCounter


class TestApiUsageCounter:
    """Tests for counting and periodic reset."""

    def test_increment_and_reset(self):
        counter = ApiUsageCounter()

        counter.increment()
        assert counter.increment() == 2
        assert counter.value == 2

        counter.reset()
        assert counter.value == 0

    @pytest.mark.asyncio
    async def test_periodic_reset_zeroes_counter(self):
        # Arrange
        counter = ApiUsageCounter(reset_interval_seconds=0.01)
        counter.increment()
        counter.increment()

        # Act
        task = asyncio.create_task(counter.run_periodic_reset())
        await asyncio.sleep(0.05)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        # Assert
        assert counter.value == 0
