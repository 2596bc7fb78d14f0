"""Unit tests for PermissionResolver."""

import pytest

from roleperm.application.services.permission_resolver import PermissionResolver
from roleperm.domain.value_objects import PermissionSet

from tests.fakes import USER_ID, FakeStore, RecordingCache, make_uow_factory


@pytest.mark.asyncio
async def test_role_permission_sets_in_role_order(resolver: PermissionResolver) -> None:
    role_sets = await resolver.role_permission_sets(USER_ID)
    assert role_sets == [
        PermissionSet({"posts.edit": {"create": True, "delete": False}}),
        PermissionSet({"posts.edit": {"delete": True}}),
    ]


@pytest.mark.asyncio
async def test_roles_merge_more_permissive(resolver: PermissionResolver) -> None:
    """Author + Moderator -> create and delete on posts.edit."""
    merged = await resolver.get_permissions(USER_ID)
    assert merged == {"posts.edit": {"create": True, "delete": True}}
    assert await resolver.can(USER_ID, "delete.posts.edit") is True


@pytest.mark.asyncio
async def test_override_revokes_role_grant(store: FakeStore, resolver: PermissionResolver) -> None:
    store.user_permissions[USER_ID] = [13]
    merged = await resolver.get_permissions(USER_ID)
    assert merged == {"posts.edit": {"create": True, "delete": False}}
    assert await resolver.can(USER_ID, "delete.posts.edit") is False
    assert await resolver.can(USER_ID, "create.posts.edit") is True


@pytest.mark.asyncio
async def test_role_rows_within_one_role_are_or_merged(store: FakeStore, resolver: PermissionResolver) -> None:
    store.role_permissions[1] = [11, 12]
    role_sets = await resolver.role_permission_sets(USER_ID)
    assert role_sets[0] == {"posts.edit": {"create": True, "delete": True}}


@pytest.mark.asyncio
async def test_override_set_highest_id_wins(store: FakeStore, resolver: PermissionResolver) -> None:
    """Rows 12 (delete) and 13 (no delete) both touch posts.edit; 13 applies last."""
    store.user_permissions[USER_ID] = [13, 12]
    override = await resolver.override_permission_set(USER_ID)
    assert override == {"posts.edit": {"delete": False}}


@pytest.mark.asyncio
async def test_user_without_roles_is_denied(resolver: PermissionResolver) -> None:
    assert await resolver.get_permissions("nobody") == PermissionSet()
    assert await resolver.can("nobody", "read.users") is False


@pytest.mark.asyncio
async def test_override_only_user(store: FakeStore, resolver: PermissionResolver) -> None:
    store.user_permissions["user-2"] = [20]
    assert await resolver.can("user-2", "read.users") is True
    assert await resolver.can("user-2", "update.users") is False


@pytest.mark.asyncio
async def test_parent_loaded_for_inheritance(store: FakeStore, resolver: PermissionResolver) -> None:
    """Parent rows not attached anywhere are fetched to apply inheritance."""
    store.add_permission(30, "reports", {"read": True, "export": False})
    store.add_permission(31, "reports.export", {"export": True}, inherit_id=30)
    store.user_permissions["user-3"] = [31]
    assert await resolver.get_permissions("user-3") == {
        "reports": {"read": True, "export": True}
    }


@pytest.mark.asyncio
async def test_results_cached_under_both_keys(store: FakeStore) -> None:
    cache = RecordingCache()
    resolver = PermissionResolver(make_uow_factory(store), cache, ttl=60)

    await resolver.can(USER_ID, "create.posts.edit")
    await resolver.can(USER_ID, "create.posts.edit")

    assert set(cache.values) == {
        "permissions:by-user:user-1",
        "merged:by-user:user-1",
    }
    # Second check is served from the merged key without touching storage.
    store.role_permissions.clear()
    assert await resolver.can(USER_ID, "create.posts.edit") is True


@pytest.mark.asyncio
async def test_invalidate_drops_both_keys(store: FakeStore) -> None:
    cache = RecordingCache()
    resolver = PermissionResolver(make_uow_factory(store), cache, ttl=60, key_prefix="acl:")
    await resolver.get_effective_permissions(USER_ID)

    await resolver.invalidate(USER_ID)

    assert cache.values == {}
    assert ("invalidate", "acl:permissions:by-user:user-1") in cache.calls
    assert ("invalidate", "acl:merged:by-user:user-1") in cache.calls


@pytest.mark.asyncio
async def test_stale_until_invalidated(store: FakeStore, resolver: PermissionResolver) -> None:
    assert await resolver.can(USER_ID, "delete.posts.edit") is True
    store.user_permissions[USER_ID] = [13]
    assert await resolver.can(USER_ID, "delete.posts.edit") is True
    await resolver.invalidate(USER_ID)
    assert await resolver.can(USER_ID, "delete.posts.edit") is False
