"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from sharedrive.application.ports.repositories.grant_repository import GrantRepository
from sharedrive.application.ports.repositories.principal_repository import (
    PrincipalRepository,
)
from sharedrive.application.ports.repositories.resource_repository import (
    ResourceRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def resources(self) -> ResourceRepository: ...

    @property
    def grants(self) -> GrantRepository: ...

    @property
    def principals(self) -> PrincipalRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory returning an async context manager that yields a UnitOfWork."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
