"""Pytest fixtures for roleperm tests."""

from __future__ import annotations

import pytest

from roleperm.application.services.permission_resolver import PermissionResolver
from roleperm.infrastructure.cache.memory_cache import InMemoryTTLCache

from tests.fakes import USER_ID, FakeStore, make_uow_factory


@pytest.fixture
def store() -> FakeStore:
    """Store seeded with the posts.edit scenario.

    posts.edit (10) is the base permission; the author (11), moderator (12)
    and no-delete (13) rows inherit from it and so all act on ``posts.edit``.
    user-1 has the Author and Moderator roles and no overrides.
    """
    s = FakeStore()
    s.add_permission(10, "posts.edit", {})
    s.add_permission(11, "posts.edit.author", {"create": True, "delete": False}, inherit_id=10)
    s.add_permission(12, "posts.edit.moderator", {"delete": True}, inherit_id=10)
    s.add_permission(13, "posts.edit.no-delete", {"delete": False}, inherit_id=10)
    s.add_permission(20, "users", {"read": True, "update": False})
    s.add_role(1, "Author", [11])
    s.add_role(2, "Moderator", [12])
    s.give_role(USER_ID, 1)
    s.give_role(USER_ID, 2)
    return s


@pytest.fixture
def uow_factory(store: FakeStore):
    """Factory returning async context manager over the shared store."""
    return make_uow_factory(store)


@pytest.fixture
def cache() -> InMemoryTTLCache:
    return InMemoryTTLCache()


@pytest.fixture
def resolver(uow_factory, cache) -> PermissionResolver:
    return PermissionResolver(unit_of_work_factory=uow_factory, cache=cache, ttl=60)
