"""Revoke all permissions use case."""

import logging

from roleperm.application.services.permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)


class RevokeAllPermissionsUseCase:
    """Detach every permission attached directly to a user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(self, user_id: str) -> int:
        """Revoke all overrides from user. Returns number removed."""
        await self._resolver.invalidate(user_id)

        async with self._uow_factory() as uow:
            removed = await uow.user_permissions.detach_all(user_id)

        logger.info("Revoked %d permissions from user %s", removed, user_id)
        return removed
