"""Unit tests for TTLCache."""

from cardiac.util.cache import TTLCache


class FakeTimer:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestTTLCache:
    """Tests for fresh and stale lookups."""

    def test_fresh_value_returned_until_ttl(self):
        timer = FakeTimer()
        cache = TTLCache(ttl_seconds=300, stale_ttl_seconds=3600, timer=timer)
        cache.set("coins", [1, 2, 3])

        timer.now = 299
        assert cache.get("coins") == [1, 2, 3]

        timer.now = 300
        assert cache.get("coins") is None

    def test_stale_value_available_until_stale_ttl(self):
        timer = FakeTimer()
        cache = TTLCache(ttl_seconds=300, stale_ttl_seconds=3600, timer=timer)
        cache.set("coins", "payload")

        timer.now = 1800
        assert cache.get("coins") is None
        assert cache.get_stale("coins") == "payload"

        timer.now = 3600
        assert cache.get_stale("coins") is None
        assert len(cache) == 0

    def test_set_refreshes_entry(self):
        timer = FakeTimer()
        cache = TTLCache(ttl_seconds=10, timer=timer)
        cache.set("k", "old")
        timer.now = 8
        cache.set("k", "new")
        timer.now = 15

        assert cache.get("k") == "new"

    def test_oldest_entry_evicted_when_full(self):
        timer = FakeTimer()
        cache = TTLCache(ttl_seconds=60, max_entries=2, timer=timer)
        cache.set("a", 1)
        timer.now = 1
        cache.set("b", 2)
        timer.now = 2
        cache.set("c", 3)

        assert cache.get("a") is None
        assert cache.get("b") == 2
        assert cache.get("c") == 3

    def test_clear(self):
        cache = TTLCache(ttl_seconds=60)
        cache.set("a", 1)

        cache.clear()

        assert cache.get("a") is None
