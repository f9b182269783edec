"""Resource entity - folder or file node in the sharing hierarchy."""

from dataclasses import dataclass
from uuid import UUID

from sharedrive.domain.value_objects import ResourceKind, ResourceRef


@dataclass
class Resource:
    """Folder or file. parent_id is the containing folder, None for a root folder."""

    id: UUID
    kind: ResourceKind
    owner_id: str
    parent_id: UUID | None = None
    name: str | None = None

    @property
    def ref(self) -> ResourceRef:
        return ResourceRef(self.kind, self.id)

    @property
    def parent_ref(self) -> ResourceRef | None:
        # Both folders and files point at a folder.
        if self.parent_id is None:
            return None
        return ResourceRef.folder(self.parent_id)

    @property
    def is_root(self) -> bool:
        return self.kind is ResourceKind.FOLDER and self.parent_id is None
