"""PostgreSQL user lookup."""

from psycopg import AsyncConnection

from sharedrive.domain.entities import Principal


class PostgresPrincipalRepository:
    """Principal repository implementation over app_user."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, principal_id: str) -> Principal | None:
        """Get user by id."""
        cur = await self._conn.execute(
            "SELECT id, roles, is_superadmin, name, email FROM app_user WHERE id = %s",
            (principal_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Principal(
            id=r[0],
            roles=frozenset(r[1] or ()),
            is_superadmin=bool(r[2]),
            name=r[3],
            email=r[4],
        )
