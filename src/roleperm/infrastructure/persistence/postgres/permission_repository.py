"""PostgreSQL permission repository implementation."""

import json
from collections.abc import Iterable, Sequence

from psycopg import AsyncConnection

from roleperm.domain.entities import PermissionRecord

PERMISSION_COLUMNS = "p.id, p.name, p.slug, p.description, p.inherit_id, p.created_at, p.updated_at"


def _row_to_permission(r: Sequence) -> PermissionRecord:
    """Map a PERMISSION_COLUMNS row to a record. ``slug`` holds the clearance JSON."""
    clearances = r[2]
    if isinstance(clearances, str):
        clearances = json.loads(clearances)
    return PermissionRecord(
        id=r[0],
        name=r[1],
        clearances={str(k): bool(v) for k, v in (clearances or {}).items()},
        description=r[3],
        inherit_id=r[4],
        created_at=r[5],
        updated_at=r[6],
    )


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find_by_id(self, permission_id: int) -> PermissionRecord | None:
        """Get permission by id."""
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission p WHERE p.id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def find_by_name(self, name: str) -> PermissionRecord | None:
        """Get permission by name."""
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission p WHERE p.name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def list_by_ids(self, permission_ids: Iterable[int]) -> list[PermissionRecord]:
        """List permissions with the given ids, ordered by id."""
        ids = list(permission_ids)
        if not ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission p WHERE p.id = ANY(%s) ORDER BY p.id",
            (ids,),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]
