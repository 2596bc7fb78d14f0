"""Check permission use case."""

from collections.abc import Sequence

from roleperm.application.services.permission_resolver import PermissionResolver
from roleperm.domain.value_objects import LogicalOperator


class CheckPermissionUseCase:
    """Answer whether a user holds a permission."""

    def __init__(self, permission_resolver: PermissionResolver) -> None:
        self._resolver = permission_resolver

    async def execute(
        self,
        user_id: str,
        permission: str | Sequence[str],
        operator: str | LogicalOperator | None = None,
    ) -> bool:
        return await self._resolver.can(user_id, permission, operator)
