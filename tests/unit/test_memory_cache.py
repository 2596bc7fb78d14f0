"""Unit tests for InMemoryTTLCache."""

from datetime import UTC, datetime, timedelta

import pytest

from roleperm.infrastructure.cache.memory_cache import InMemoryTTLCache


class FakeClock:
    """Manually advanced clock."""

    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> InMemoryTTLCache:
    return InMemoryTTLCache(clock=clock)


def _counting_producer():
    calls = []

    async def produce():
        calls.append(1)
        return len(calls)

    return produce, calls


@pytest.mark.asyncio
async def test_get_or_compute_memoizes(cache: InMemoryTTLCache) -> None:
    produce, calls = _counting_producer()
    assert await cache.get_or_compute("k", 60, produce) == 1
    assert await cache.get_or_compute("k", 60, produce) == 1
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_entry_expires_after_ttl(cache: InMemoryTTLCache, clock: FakeClock) -> None:
    produce, calls = _counting_producer()
    await cache.get_or_compute("k", 60, produce)

    clock.advance(59)
    assert await cache.get_or_compute("k", 60, produce) == 1
    clock.advance(1)
    assert await cache.get_or_compute("k", 60, produce) == 2


@pytest.mark.asyncio
async def test_invalidate_forces_recompute(cache: InMemoryTTLCache) -> None:
    produce, calls = _counting_producer()
    await cache.get_or_compute("k", 60, produce)
    await cache.invalidate("k")
    assert await cache.get_or_compute("k", 60, produce) == 2


@pytest.mark.asyncio
async def test_invalidate_missing_key_is_noop(cache: InMemoryTTLCache) -> None:
    await cache.invalidate("missing")
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_producer_error_not_cached(cache: InMemoryTTLCache) -> None:
    async def boom():
        raise RuntimeError("storage down")

    with pytest.raises(RuntimeError):
        await cache.get_or_compute("k", 60, boom)
    assert cache.get("k") is None


def test_get_and_set(cache: InMemoryTTLCache, clock: FakeClock) -> None:
    cache.set("k", {"a": 1}, ttl=10)
    assert cache.get("k") == {"a": 1}
    clock.advance(10)
    assert cache.get("k") is None
    assert len(cache) == 0


def test_cleanup_expired(cache: InMemoryTTLCache, clock: FakeClock) -> None:
    cache.set("short", 1, ttl=5)
    cache.set("long", 2, ttl=500)
    clock.advance(10)
    assert cache.cleanup_expired() == 1
    assert cache.get("long") == 2
