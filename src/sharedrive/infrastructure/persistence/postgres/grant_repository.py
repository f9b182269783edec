"""PostgreSQL grant repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection, errors, sql

from sharedrive.domain.entities import Grant
from sharedrive.domain.exceptions import Conflict
from sharedrive.domain.value_objects import GrantAction, ResourceKind, ResourceRef

# kind -> (table, resource column)
_TABLES = {
    ResourceKind.FOLDER: ("user_folder_permission", "folder_id"),
    ResourceKind.FILE: ("user_file_permission", "file_id"),
}

_COLUMNS = "id, user_id, {column}, permissions, created_at, updated_at, granted_by"


def _select(kind: ResourceKind, where: str) -> sql.Composed:
    table, column = _TABLES[kind]
    return sql.SQL("SELECT {columns} FROM {table} WHERE " + where).format(
        columns=sql.SQL(_COLUMNS.format(column=column)),
        table=sql.Identifier(table),
        column=sql.Identifier(column),
    )


def _row_to_grant(kind: ResourceKind, r: tuple) -> Grant:
    return Grant(
        id=r[0],
        principal_id=r[1],
        resource=ResourceRef(kind, r[2]),
        action=GrantAction(r[3]),
        created_at=r[4],
        updated_at=r[5],
        granted_by=r[6],
    )


class PostgresGrantRepository:
    """Grant repository over user_folder_permission and user_file_permission."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, principal_id: str, ref: ResourceRef) -> Grant | None:
        """Get grant of user on folder or file."""
        cur = await self._conn.execute(
            _select(ref.kind, "user_id = %s AND {column} = %s"),
            (principal_id, ref.id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_grant(ref.kind, r)

    async def list_for_resource(self, ref: ResourceRef) -> list[Grant]:
        """List grants on folder or file."""
        cur = await self._conn.execute(_select(ref.kind, "{column} = %s"), (ref.id,))
        rows = await cur.fetchall()
        return [_row_to_grant(ref.kind, r) for r in rows]

    async def list_for_principal(self, principal_id: str) -> list[Grant]:
        """List grants held by user, folders first."""
        grants: list[Grant] = []
        for kind in (ResourceKind.FOLDER, ResourceKind.FILE):
            cur = await self._conn.execute(_select(kind, "user_id = %s"), (principal_id,))
            rows = await cur.fetchall()
            grants.extend(_row_to_grant(kind, r) for r in rows)
        return grants

    async def create(self, grant: Grant) -> Grant:
        """Create grant. Unique index on (user_id, resource) makes this atomic."""
        table, column = _TABLES[grant.resource.kind]
        query = sql.SQL(
            "INSERT INTO {table} "
            "(id, user_id, {column}, permissions, created_at, updated_at, granted_by) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s)"
        ).format(table=sql.Identifier(table), column=sql.Identifier(column))
        try:
            async with self._conn.transaction():
                await self._conn.execute(
                    query,
                    (
                        grant.id,
                        grant.principal_id,
                        grant.resource.id,
                        grant.action.value,
                        grant.created_at,
                        grant.updated_at,
                        grant.granted_by,
                    ),
                )
        except errors.UniqueViolation as e:
            raise Conflict(
                f"User {grant.principal_id} already has a permission on {grant.resource}"
            ) from e
        return grant

    async def update(self, grant: Grant) -> None:
        """Update grant action."""
        table, _ = _TABLES[grant.resource.kind]
        await self._conn.execute(
            sql.SQL("UPDATE {table} SET permissions = %s, updated_at = %s WHERE id = %s").format(
                table=sql.Identifier(table)
            ),
            (grant.action.value, grant.updated_at, grant.id),
        )

    async def delete(self, grant_id: UUID, kind: ResourceKind) -> None:
        """Delete grant."""
        table, _ = _TABLES[kind]
        await self._conn.execute(
            sql.SQL("DELETE FROM {table} WHERE id = %s").format(table=sql.Identifier(table)),
            (grant_id,),
        )
