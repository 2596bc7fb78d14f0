"""Domain value objects."""

from roleperm.domain.value_objects.logical_operator import LogicalOperator
from roleperm.domain.value_objects.permission_ref import (
    ById,
    ByName,
    PermissionRef,
    Resolved,
    parse_permission_ref,
)
from roleperm.domain.value_objects.permission_set import ClearanceMap, PermissionSet

__all__ = [
    "ById",
    "ByName",
    "ClearanceMap",
    "LogicalOperator",
    "PermissionRef",
    "PermissionSet",
    "Resolved",
    "parse_permission_ref",
]
