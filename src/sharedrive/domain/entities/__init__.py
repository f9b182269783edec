"""Domain entities."""

from sharedrive.domain.entities.grant import Grant
from sharedrive.domain.entities.principal import ADMIN_ROLE, USER_ROLE, Principal
from sharedrive.domain.entities.resource import Resource

__all__ = [
    "ADMIN_ROLE",
    "Grant",
    "Principal",
    "Resource",
    "USER_ROLE",
]
