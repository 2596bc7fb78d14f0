"""PostgreSQL user permission (override) repository implementation."""

from collections.abc import Iterable

from psycopg import AsyncConnection

from roleperm.application.ports.repositories import SyncResult
from roleperm.domain.entities import PermissionRecord
from roleperm.infrastructure.persistence.postgres.permission_repository import (
    PERMISSION_COLUMNS,
    _row_to_permission,
)


def _diff_ids(current: Iterable[int], desired: Iterable[int]) -> SyncResult:
    """Ids to attach and detach to turn current into desired, each sorted."""
    current_set = set(current)
    desired_set = set(desired)
    return SyncResult(
        attached=sorted(desired_set - current_set),
        detached=sorted(current_set - desired_set),
    )


class PostgresUserPermissionRepository:
    """Permissions attached directly to users (permission_user)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_attached(self, user_id: str) -> set[int]:
        """Ids of permissions attached to user."""
        cur = await self._conn.execute(
            "SELECT permission_id FROM permission_user WHERE user_id = %s",
            (user_id,),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}

    async def list_records(self, user_id: str) -> list[PermissionRecord]:
        """Permissions attached to user, ordered by permission id."""
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission p "
            "JOIN permission_user pu ON pu.permission_id = p.id "
            "WHERE pu.user_id = %s ORDER BY p.id",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def attach(self, user_id: str, permission_id: int) -> None:
        """Attach permission to user."""
        await self._conn.execute(
            "INSERT INTO permission_user (permission_id, user_id, created_at, updated_at) "
            "VALUES (%s, %s, now(), now()) ON CONFLICT DO NOTHING",
            (permission_id, user_id),
        )

    async def detach(self, user_id: str, permission_id: int) -> bool:
        """Detach permission from user. False when it was not attached."""
        cur = await self._conn.execute(
            "DELETE FROM permission_user WHERE user_id = %s AND permission_id = %s",
            (user_id, permission_id),
        )
        return cur.rowcount > 0

    async def detach_all(self, user_id: str) -> int:
        """Detach every permission from user."""
        cur = await self._conn.execute(
            "DELETE FROM permission_user WHERE user_id = %s",
            (user_id,),
        )
        return cur.rowcount

    async def replace_all(self, user_id: str, permission_ids: Iterable[int]) -> SyncResult:
        """Make the user's attached permissions exactly permission_ids."""
        result = _diff_ids(await self.list_attached(user_id), permission_ids)
        if result.detached:
            await self._conn.execute(
                "DELETE FROM permission_user WHERE user_id = %s AND permission_id = ANY(%s)",
                (user_id, result.detached),
            )
        if result.attached:
            async with self._conn.cursor() as cur:
                await cur.executemany(
                    "INSERT INTO permission_user (permission_id, user_id, created_at, updated_at) "
                    "VALUES (%s, %s, now(), now())",
                    [(permission_id, user_id) for permission_id in result.attached],
                )
        return result
