"""PostgreSQL folder and file lookup."""

from psycopg import AsyncConnection

from sharedrive.domain.entities import Resource
from sharedrive.domain.value_objects import ResourceKind, ResourceRef

# Files reference their containing folder, folders their parent folder.
_SELECT = {
    ResourceKind.FOLDER: "SELECT id, owner_id, parent_id, name FROM folder WHERE id = %s",
    ResourceKind.FILE: "SELECT id, owner_id, folder_id, name FROM file WHERE id = %s",
}


class PostgresResourceRepository:
    """Resource repository implementation over the folder and file tables."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, ref: ResourceRef) -> Resource | None:
        """Get folder or file by reference."""
        cur = await self._conn.execute(_SELECT[ref.kind], (ref.id,))
        r = await cur.fetchone()
        if not r:
            return None
        return Resource(id=r[0], kind=ref.kind, owner_id=r[1], parent_id=r[2], name=r[3])
