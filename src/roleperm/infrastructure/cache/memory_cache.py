"""In-memory TTL cache.

Single-process only: entries live in a dict and are lost on restart.
"""

import logging
import threading
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryTTLCache:
    """Cache adapter backed by a dict of ``key -> (value, expiry)``."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._entries: dict[str, tuple[Any, datetime]] = {}
        self._lock = threading.Lock()
        self._clock = clock or (lambda: datetime.now(UTC))

    def _is_expired(self, expiry: datetime) -> bool:
        return self._clock() >= expiry

    def get(self, key: str) -> Any | None:
        """Cached value for key, or None when missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expiry = entry
            if self._is_expired(expiry):
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: Any, ttl: int) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + timedelta(seconds=ttl))

    async def get_or_compute(
        self, key: str, ttl: int, producer: Callable[[], Awaitable[T]]
    ) -> T:
        """Return cached value for key, computing and storing it on a miss."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and not self._is_expired(entry[1]):
                logger.debug("Cache hit: %s", key)
                return entry[0]

        logger.debug("Cache miss: %s", key)
        value = await producer()
        self.set(key, value, ttl)
        return value

    async def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def cleanup_expired(self) -> int:
        """Drop expired entries. Returns number removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, (_, expiry) in self._entries.items() if now >= expiry]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
