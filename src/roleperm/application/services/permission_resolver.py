"""Permission resolver - effective permissions for a user, cached."""

import logging
from collections.abc import Sequence

from roleperm.application.ports import Cache, UnitOfWork
from roleperm.domain.entities import PermissionRecord
from roleperm.domain.services import (
    can,
    merge_override_records,
    merge_permission_sets,
    to_permission_set,
)
from roleperm.domain.value_objects import LogicalOperator, PermissionSet

logger = logging.getLogger(__name__)

PERMISSIONS_KEY = "permissions:by-user:{user_id}"
MERGED_KEY = "merged:by-user:{user_id}"


class PermissionResolver:
    """Merges role and override permissions for a user and answers checks.

    Both the merged set and the effective set used for decisions are cached
    per user; every override mutation must call ``invalidate`` before it
    changes rows.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        cache: Cache,
        ttl: int,
        key_prefix: str = "",
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._cache = cache
        self._ttl = ttl
        self._key_prefix = key_prefix

    def permissions_key(self, user_id: str) -> str:
        return self._key_prefix + PERMISSIONS_KEY.format(user_id=user_id)

    def merged_key(self, user_id: str) -> str:
        return self._key_prefix + MERGED_KEY.format(user_id=user_id)

    async def role_permission_sets(self, user_id: str) -> list[PermissionSet]:
        """One PermissionSet per role of the user, in role order."""
        async with self._uow_factory() as uow:
            return await self._role_permission_sets(uow, user_id)

    async def override_permission_set(self, user_id: str) -> PermissionSet:
        """Permissions attached directly to the user, folded by permission id."""
        async with self._uow_factory() as uow:
            return await self._override_permission_set(uow, user_id)

    async def get_permissions(self, user_id: str) -> PermissionSet:
        """Role permissions merged with user overrides (cached)."""

        async def produce() -> PermissionSet:
            async with self._uow_factory() as uow:
                role_sets = await self._role_permission_sets(uow, user_id)
                override_set = await self._override_permission_set(uow, user_id)
            return merge_permission_sets(role_sets, override_set)

        return await self._cache.get_or_compute(self.permissions_key(user_id), self._ttl, produce)

    async def get_effective_permissions(self, user_id: str) -> PermissionSet:
        """Effective set used for decisions (cached)."""

        async def produce() -> PermissionSet:
            return await self.get_permissions(user_id)

        return await self._cache.get_or_compute(self.merged_key(user_id), self._ttl, produce)

    async def can(
        self,
        user_id: str,
        permission: str | Sequence[str],
        operator: str | LogicalOperator | None = None,
    ) -> bool:
        """Check if user has permission."""
        effective = await self.get_effective_permissions(user_id)
        return can(effective, permission, operator)

    async def invalidate(self, user_id: str) -> None:
        """Drop cached permission sets for user."""
        await self._cache.invalidate(self.permissions_key(user_id))
        await self._cache.invalidate(self.merged_key(user_id))
        logger.debug("Invalidated permission cache for user %s", user_id)

    async def _role_permission_sets(self, uow: UnitOfWork, user_id: str) -> list[PermissionSet]:
        role_sets: list[PermissionSet] = []
        for role in await uow.roles.list_for_user(user_id):
            records = await uow.roles.list_permissions_for_role(role.id)
            by_id = await _with_ancestors(uow, records)
            rows = [to_permission_set(record, by_id) for record in records]
            role_sets.append(merge_permission_sets(rows))
        return role_sets

    async def _override_permission_set(self, uow: UnitOfWork, user_id: str) -> PermissionSet:
        records = await uow.user_permissions.list_records(user_id)
        by_id = await _with_ancestors(uow, records)
        return merge_override_records(
            (record.id, to_permission_set(record, by_id)) for record in records
        )


async def _with_ancestors(
    uow: UnitOfWork, records: list[PermissionRecord]
) -> dict[int, PermissionRecord]:
    """Index records by id, loading any parent permissions they inherit from."""
    by_id = {record.id: record for record in records}
    missing = {r.inherit_id for r in records if r.inherit_id is not None} - by_id.keys()
    while missing:
        loaded = await uow.permissions.list_by_ids(missing)
        for record in loaded:
            by_id[record.id] = record
        # Ids already indexed are never requested again.
        missing = {
            r.inherit_id for r in loaded if r.inherit_id is not None
        } - by_id.keys()
    return by_id
