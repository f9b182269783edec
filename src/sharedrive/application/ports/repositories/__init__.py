"""Repository ports."""

from sharedrive.application.ports.repositories.grant_repository import GrantRepository
from sharedrive.application.ports.repositories.principal_repository import (
    PrincipalRepository,
)
from sharedrive.application.ports.repositories.resource_repository import (
    ResourceRepository,
)

__all__ = [
    "GrantRepository",
    "PrincipalRepository",
    "ResourceRepository",
]
