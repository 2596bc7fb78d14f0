"""Role repository port."""

from typing import Protocol

from roleperm.domain.entities import PermissionRecord, Role


class RoleRepository(Protocol):
    """Port for roles assigned to users and the permissions they carry."""

    async def list_for_user(self, user_id: str) -> list[Role]: ...

    async def list_permissions_for_role(self, role_id: int) -> list[PermissionRecord]: ...
