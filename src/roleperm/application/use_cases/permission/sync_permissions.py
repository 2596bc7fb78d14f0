"""Sync permissions use case."""

import logging

from roleperm.application.ports.repositories import SyncResult
from roleperm.application.services.permission_reference import resolve_permission_ids
from roleperm.application.services.permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)


class SyncPermissionsUseCase:
    """Replace a user's directly attached permissions with exactly the given set."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(self, user_id: str, permissions: object) -> SyncResult:
        """Sync user overrides. An empty list removes them all."""
        async with self._uow_factory() as uow:
            permission_ids = await resolve_permission_ids(uow.permissions, permissions)
            await self._resolver.invalidate(user_id)
            result = await uow.user_permissions.replace_all(user_id, permission_ids)

        logger.info(
            "Synced permissions for user %s: attached=%s detached=%s",
            user_id,
            result.attached,
            result.detached,
        )
        return result
