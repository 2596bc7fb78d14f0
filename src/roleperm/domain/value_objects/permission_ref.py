"""Permission references - the ways a caller can name a permission."""

from dataclasses import dataclass

from roleperm.domain.entities import PermissionRecord
from roleperm.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ById:
    """Reference by numeric primary key."""

    id: int


@dataclass(frozen=True)
class ByName:
    """Reference by permission name (slug)."""

    name: str


@dataclass(frozen=True)
class Resolved:
    """Already loaded permission record."""

    record: PermissionRecord


PermissionRef = ById | ByName | Resolved


def parse_permission_ref(raw: object) -> PermissionRef:
    """Build a PermissionRef from an int, a string or a PermissionRecord.

    Strings made only of digits are ids; any other non-empty string is a name.
    """
    if isinstance(raw, (ById, ByName, Resolved)):
        return raw
    if isinstance(raw, PermissionRecord):
        return Resolved(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return ById(raw)
    if isinstance(raw, str):
        value = raw.strip()
        if not value:
            raise InvalidArgumentError("Permission reference must not be empty")
        if value.isdecimal():
            return ById(int(value))
        return ByName(value)
    raise InvalidArgumentError(
        f"Unsupported permission reference type: {type(raw).__name__}"
    )
