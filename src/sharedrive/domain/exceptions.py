"""Domain exceptions."""

from sharedrive.domain.value_objects.resource_ref import ResourceRef


class ShareDriveError(Exception):
    """Base exception for sharedrive."""

    pass


class PermissionDenied(ShareDriveError):
    """User does not have permission for the requested action."""

    pass


class NotFound(ShareDriveError):
    """Requested entity was not found."""

    pass


class ResourceNotFound(NotFound):
    """Folder or file does not exist."""

    def __init__(self, ref: ResourceRef) -> None:
        super().__init__(f"{ref.kind.value.capitalize()} {ref.id} not found")
        self.ref = ref


class Unauthenticated(ShareDriveError):
    """Request has no known user behind it."""

    pass


class Conflict(ShareDriveError):
    """Entity already exists."""

    pass


class ValidationError(ShareDriveError):
    """Validation failed for input data."""

    pass


class HierarchyError(ShareDriveError):
    """Folder hierarchy is corrupted (cycle or chain deeper than allowed)."""

    pass
