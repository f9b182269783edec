"""Grant entity - explicit permission of a user on a folder or file."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sharedrive.domain.value_objects import GrantAction, ResourceRef


@dataclass
class Grant:
    """One action for one (principal, resource) pair."""

    id: UUID
    principal_id: str
    resource: ResourceRef
    action: GrantAction
    created_at: datetime
    updated_at: datetime
    granted_by: str | None = None
