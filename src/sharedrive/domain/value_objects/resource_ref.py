"""Reference to a folder or file."""

from dataclasses import dataclass
from uuid import UUID

from sharedrive.domain.value_objects.resource_kind import ResourceKind


@dataclass(frozen=True)
class ResourceRef:
    """Address of a node. Folders and files have separate id spaces."""

    kind: ResourceKind
    id: UUID

    @classmethod
    def folder(cls, folder_id: UUID) -> "ResourceRef":
        return cls(ResourceKind.FOLDER, folder_id)

    @classmethod
    def file(cls, file_id: UUID) -> "ResourceRef":
        return cls(ResourceKind.FILE, file_id)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"
