"""Revoke permission use case."""

import logging

from roleperm.application.services.permission_reference import resolve_permission_ids
from roleperm.application.services.permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)


class RevokePermissionUseCase:
    """Detach permissions from a user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(self, user_id: str, permissions: object) -> bool:
        """Revoke permissions from user. Revoking one not attached is a no-op."""
        await self._resolver.invalidate(user_id)

        async with self._uow_factory() as uow:
            permission_ids = await resolve_permission_ids(uow.permissions, permissions)
            for permission_id in permission_ids:
                await uow.user_permissions.detach(user_id, permission_id)

        logger.info("Revoked permissions %s from user %s", permission_ids, user_id)
        return True
