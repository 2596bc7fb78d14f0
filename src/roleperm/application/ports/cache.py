"""Cache port - memoized values with TTL and explicit invalidation."""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

T = TypeVar("T")


class Cache(Protocol):
    """Port for a key-value cache with per-entry TTL."""

    async def get_or_compute(
        self, key: str, ttl: int, producer: Callable[[], Awaitable[T]]
    ) -> T: ...

    async def invalidate(self, key: str) -> None: ...
