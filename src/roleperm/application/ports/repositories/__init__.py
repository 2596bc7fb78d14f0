"""Repository ports."""

from roleperm.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from roleperm.application.ports.repositories.role_repository import RoleRepository
from roleperm.application.ports.repositories.user_permission_repository import (
    SyncResult,
    UserPermissionRepository,
)

__all__ = [
    "PermissionRepository",
    "RoleRepository",
    "SyncResult",
    "UserPermissionRepository",
]
