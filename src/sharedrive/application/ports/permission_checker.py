"""Permission checker port - access decisions on folders and files."""

from collections.abc import Iterable
from typing import Protocol

from sharedrive.domain.entities import Principal
from sharedrive.domain.value_objects import AccessResult, GrantAction, ResourceRef

Actions = str | GrantAction | Iterable[str | GrantAction]


class PermissionChecker(Protocol):
    """Port for checking a principal's access to a folder or file."""

    async def check(self, principal: Principal, ref: ResourceRef, actions: Actions) -> bool:
        """True when allowed. Raises ResourceNotFound for a missing target."""
        ...

    async def resolve(
        self, principal: Principal, ref: ResourceRef, actions: Actions
    ) -> AccessResult:
        """Full decision. A missing target yields resource_not_found."""
        ...
