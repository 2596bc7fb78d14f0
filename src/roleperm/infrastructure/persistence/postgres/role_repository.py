"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection

from roleperm.domain.entities import PermissionRecord, Role
from roleperm.infrastructure.persistence.postgres.permission_repository import (
    PERMISSION_COLUMNS,
    _row_to_permission,
)


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_user(self, user_id: str) -> list[Role]:
        """List roles assigned to user, ordered by role id."""
        cur = await self._conn.execute(
            "SELECT r.id, r.name, r.slug, r.description FROM role r "
            "JOIN role_user ru ON ru.role_id = r.id "
            "WHERE ru.user_id = %s ORDER BY r.id",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [Role(id=r[0], name=r[1], slug=r[2], description=r[3]) for r in rows]

    async def list_permissions_for_role(self, role_id: int) -> list[PermissionRecord]:
        """List permissions attached to role, ordered by permission id."""
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission p "
            "JOIN permission_role pr ON pr.permission_id = p.id "
            "WHERE pr.role_id = %s ORDER BY p.id",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]
