"""Permission repository port."""

from collections.abc import Iterable
from typing import Protocol

from roleperm.domain.entities import PermissionRecord


class PermissionRepository(Protocol):
    """Port for stored permission lookup."""

    async def find_by_id(self, permission_id: int) -> PermissionRecord | None: ...

    async def find_by_name(self, name: str) -> PermissionRecord | None: ...

    async def list_by_ids(self, permission_ids: Iterable[int]) -> list[PermissionRecord]: ...
