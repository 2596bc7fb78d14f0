"""Assign permission use case."""

import logging

from roleperm.application.services.permission_reference import resolve_permission_ids
from roleperm.application.services.permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)


class AssignPermissionUseCase:
    """Attach permissions directly to a user, overriding role permissions."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(self, user_id: str, permissions: object) -> list[int | bool]:
        """Assign one or more permissions (id, name or record) to user.

        Returns one entry per input: the attached permission id, or False when
        it was already attached. Any unresolvable reference aborts the call
        before anything is attached.
        """
        await self._resolver.invalidate(user_id)

        async with self._uow_factory() as uow:
            permission_ids = await resolve_permission_ids(uow.permissions, permissions)
            attached = await uow.user_permissions.list_attached(user_id)

            applied: list[int | bool] = []
            for permission_id in permission_ids:
                if permission_id in attached:
                    applied.append(False)
                    continue
                await uow.user_permissions.attach(user_id, permission_id)
                attached.add(permission_id)
                applied.append(permission_id)

        logger.info("Assigned permissions %s to user %s", applied, user_id)
        return applied
