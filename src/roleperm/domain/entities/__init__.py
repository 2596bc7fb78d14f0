"""Domain entities."""

from roleperm.domain.entities.permission import PermissionRecord
from roleperm.domain.entities.role import Role

__all__ = [
    "PermissionRecord",
    "Role",
]
