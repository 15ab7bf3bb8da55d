"""Process-scoped TTL cache with stale fallback.

One instance lives for the lifetime of the API process (dishka APP scope).
Entries are fresh for ``ttl_seconds``. Past that they are ignored by
``get`` but stay readable through ``get_stale`` until ``stale_ttl_seconds``,
which lets callers keep serving the last good upstream response while the
upstream is failing.
"""

import time
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and when it was stored (monotonic seconds)."""

    value: Any
    stored_at: float


class TTLCache:
    """Key-value cache with a freshness window and a longer stale window."""

    def __init__(
        self,
        ttl_seconds: float,
        stale_ttl_seconds: float | None = None,
        max_entries: int = 1024,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.stale_ttl_seconds = max(stale_ttl_seconds or ttl_seconds, ttl_seconds)
        self.max_entries = max_entries
        self._timer = timer
        self._entries: dict[str, CacheEntry] = {}
        self._lock = Lock()

    def get(self, key: str) -> Any | None:
        """Return a fresh value or None."""
        return self._lookup(key, self.ttl_seconds)

    def get_stale(self, key: str) -> Any | None:
        """Return a value that is expired but still within the stale window."""
        return self._lookup(key, self.stale_ttl_seconds)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_entries:
                self._evict_oldest()
            self._entries[key] = CacheEntry(value=value, stored_at=self._timer())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _lookup(self, key: str, max_age: float) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            age = self._timer() - entry.stored_at
            if age >= self.stale_ttl_seconds:
                del self._entries[key]
                return None
            if age >= max_age:
                return None
            return entry.value

    def _evict_oldest(self) -> None:
        oldest = min(self._entries, key=lambda k: self._entries[k].stored_at)
        del self._entries[oldest]
