"""Resource repository port - folder and file lookup."""

from typing import Protocol

from sharedrive.domain.entities import Resource
from sharedrive.domain.value_objects import ResourceRef


class ResourceRepository(Protocol):
    """Port for reading folders and files by reference."""

    async def get(self, ref: ResourceRef) -> Resource | None: ...
