"""Grant repository port."""

from typing import Protocol
from uuid import UUID

from sharedrive.domain.entities import Grant
from sharedrive.domain.value_objects import ResourceKind, ResourceRef


class GrantRepository(Protocol):
    """Port for grant persistence.

    create must raise Conflict when a grant for the same (principal, resource)
    pair already exists, atomically with the insert.
    """

    async def get(self, principal_id: str, ref: ResourceRef) -> Grant | None: ...

    async def list_for_resource(self, ref: ResourceRef) -> list[Grant]: ...

    async def list_for_principal(self, principal_id: str) -> list[Grant]: ...

    async def create(self, grant: Grant) -> Grant: ...

    async def update(self, grant: Grant) -> None: ...

    async def delete(self, grant_id: UUID, kind: ResourceKind) -> None: ...
