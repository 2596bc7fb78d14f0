"""User permission (override) repository port."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from roleperm.domain.entities import PermissionRecord


@dataclass
class SyncResult:
    """Outcome of replacing a user's overrides."""

    attached: list[int] = field(default_factory=list)
    detached: list[int] = field(default_factory=list)


class UserPermissionRepository(Protocol):
    """Port for permissions attached directly to a user."""

    async def list_attached(self, user_id: str) -> set[int]: ...

    async def list_records(self, user_id: str) -> list[PermissionRecord]: ...

    async def attach(self, user_id: str, permission_id: int) -> None: ...

    async def detach(self, user_id: str, permission_id: int) -> bool: ...

    async def detach_all(self, user_id: str) -> int: ...

    async def replace_all(self, user_id: str, permission_ids: Iterable[int]) -> SyncResult: ...
