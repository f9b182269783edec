"""Principal repository port."""

from typing import Protocol

from sharedrive.domain.entities import Principal


class PrincipalRepository(Protocol):
    """Port for user lookup."""

    async def get_by_id(self, principal_id: str) -> Principal | None: ...
