"""Pytest fixtures for sharedrive tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

import pytest

from sharedrive.domain.entities import ADMIN_ROLE, USER_ROLE, Grant, Principal, Resource
from sharedrive.domain.exceptions import Conflict
from sharedrive.domain.value_objects import GrantAction, ResourceKind, ResourceRef


# --- Fake repositories ---


class FakeResourceRepository:
    """In-memory folders and files."""

    def __init__(self) -> None:
        self._by_ref: dict[ResourceRef, Resource] = {}
        self.lookups: list[ResourceRef] = []

    async def get(self, ref: ResourceRef) -> Resource | None:
        self.lookups.append(ref)
        return self._by_ref.get(ref)

    def add(self, resource: Resource) -> Resource:
        """Helper to add folder or file for tests."""
        self._by_ref[resource.ref] = resource
        return resource


class FakeGrantRepository:
    """In-memory grants, unique per (principal, resource)."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Grant] = {}

    async def get(self, principal_id: str, ref: ResourceRef) -> Grant | None:
        for g in self._by_id.values():
            if g.principal_id == principal_id and g.resource == ref:
                return g
        return None

    async def list_for_resource(self, ref: ResourceRef) -> list[Grant]:
        return [g for g in self._by_id.values() if g.resource == ref]

    async def list_for_principal(self, principal_id: str) -> list[Grant]:
        return [g for g in self._by_id.values() if g.principal_id == principal_id]

    async def create(self, grant: Grant) -> Grant:
        if await self.get(grant.principal_id, grant.resource):
            raise Conflict(f"User {grant.principal_id} already has a permission")
        self._by_id[grant.id] = grant
        return grant

    async def update(self, grant: Grant) -> None:
        self._by_id[grant.id] = grant

    async def delete(self, grant_id: UUID, kind: ResourceKind) -> None:
        grant = self._by_id.get(grant_id)
        if grant and grant.resource.kind is kind:
            del self._by_id[grant_id]

    def add(
        self, principal_id: str, ref: ResourceRef, action: GrantAction | str
    ) -> Grant:
        """Helper to add grant for tests."""
        now = datetime.now(UTC)
        grant = Grant(
            id=uuid4(),
            principal_id=principal_id,
            resource=ref,
            action=GrantAction(action),
            created_at=now,
            updated_at=now,
        )
        self._by_id[grant.id] = grant
        return grant


class FakePrincipalRepository:
    """In-memory users."""

    def __init__(self) -> None:
        self._by_id: dict[str, Principal] = {}

    async def get_by_id(self, principal_id: str) -> Principal | None:
        return self._by_id.get(principal_id)

    def add(self, principal: Principal) -> Principal:
        """Helper to add user for tests."""
        self._by_id[principal.id] = principal
        return principal


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.resources = FakeResourceRepository()
        self.grants = FakeGrantRepository()
        self.principals = FakePrincipalRepository()
        self.committed = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass


def fake_pool(error: Exception | None = None) -> MagicMock:
    """Connection pool mock; connection() fails with error when given."""
    conn = MagicMock()
    conn.execute = AsyncMock()
    pool = MagicMock()
    ctx = pool.connection.return_value
    if error is None:
        ctx.__aenter__ = AsyncMock(return_value=conn)
    else:
        ctx.__aenter__ = AsyncMock(side_effect=error)
    ctx.__aexit__ = AsyncMock(return_value=False)
    pool.conn = conn
    return pool


def factory_for(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Builders ---


def user(principal_id: str) -> Principal:
    return Principal(id=principal_id, roles=frozenset({USER_ROLE}))


def admin(principal_id: str, superadmin: bool = False) -> Principal:
    return Principal(
        id=principal_id,
        roles=frozenset({USER_ROLE, ADMIN_ROLE}),
        is_superadmin=superadmin,
    )


def folder(owner_id: str, parent: Resource | None = None, name: str | None = None) -> Resource:
    return Resource(
        id=uuid4(),
        kind=ResourceKind.FOLDER,
        owner_id=owner_id,
        parent_id=parent.id if parent else None,
        name=name,
    )


def file(owner_id: str, parent: Resource, name: str | None = None) -> Resource:
    return Resource(
        id=uuid4(),
        kind=ResourceKind.FILE,
        owner_id=owner_id,
        parent_id=parent.id,
        name=name,
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return factory_for(fake_uow)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - allows by default."""
    mock = AsyncMock()
    mock.check.return_value = True
    return mock
