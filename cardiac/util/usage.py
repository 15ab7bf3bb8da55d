"""Upstream API usage counter."""

import asyncio
from threading import Lock

import logfire


class ApiUsageCounter:
    """Counts calls made to the market data upstream.

    Lifecycle: created once per process (dishka APP scope), incremented by
    MarketService on every upstream request, read by the admin stats
    endpoint, and zeroed every ``reset_interval_seconds`` by
    ``run_periodic_reset`` (started from the FastAPI lifespan).
    """

    def __init__(self, reset_interval_seconds: float = 24 * 60 * 60) -> None:
        self.reset_interval_seconds = reset_interval_seconds
        self._count = 0
        self._lock = Lock()

    @property
    def value(self) -> int:
        return self._count

    def increment(self) -> int:
        with self._lock:
            self._count += 1
            return self._count

    def reset(self) -> None:
        with self._lock:
            previous = self._count
            self._count = 0
        logfire.info("API usage counter reset", previous=previous)

    async def run_periodic_reset(self) -> None:
        """Reset the counter forever on a fixed period. Cancel to stop."""
        while True:
            await asyncio.sleep(self.reset_interval_seconds)
            self.reset()
