"""Permission reference resolution - name, id or record to a permission id."""

from collections.abc import Iterable

from roleperm.application.ports.repositories import PermissionRepository
from roleperm.domain.exceptions import NotFoundError
from roleperm.domain.value_objects import ById, ByName, Resolved, parse_permission_ref


def as_ref_list(refs: object) -> list[object]:
    """Normalize a single reference or an iterable of references to a list."""
    if isinstance(refs, (str, bytes, int)) or not isinstance(refs, Iterable):
        return [refs]
    return list(refs)


async def resolve_permission_id(permissions: PermissionRepository, raw: object) -> int:
    """Resolve one reference to a stored permission id.

    Raises InvalidArgumentError for unsupported input and NotFoundError when
    the id or name is not stored.
    """
    ref = parse_permission_ref(raw)
    match ref:
        case Resolved(record=record):
            return record.id
        case ById(id=permission_id):
            record = await permissions.find_by_id(permission_id)
            if record is None:
                raise NotFoundError("Permission", permission_id)
            return record.id
        case ByName(name=name):
            record = await permissions.find_by_name(name)
            if record is None:
                raise NotFoundError("Permission", name)
            return record.id


async def resolve_permission_ids(permissions: PermissionRepository, refs: object) -> list[int]:
    """Resolve every reference, in order. Fails on the first bad one."""
    return [await resolve_permission_id(permissions, raw) for raw in as_ref_list(refs)]
