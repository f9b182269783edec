"""Unit tests for PostgreSQL repositories against a mocked connection."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from psycopg import errors

from sharedrive.domain.entities import Grant
from sharedrive.domain.exceptions import Conflict
from sharedrive.domain.value_objects import GrantAction, ResourceKind, ResourceRef
from sharedrive.infrastructure.persistence.postgres.grant_repository import PostgresGrantRepository
from sharedrive.infrastructure.persistence.postgres.principal_repository import (
    PostgresPrincipalRepository,
)
from sharedrive.infrastructure.persistence.postgres.resource_repository import (
    PostgresResourceRepository,
)


def _conn(row=None, rows=None) -> MagicMock:
    cur = MagicMock()
    cur.fetchone = AsyncMock(return_value=row)
    cur.fetchall = AsyncMock(return_value=rows or [])
    conn = MagicMock()
    conn.execute = AsyncMock(return_value=cur)
    return conn


@pytest.mark.asyncio
async def test_resource_repository_maps_file_row() -> None:
    file_id, folder_id = uuid4(), uuid4()
    conn = _conn(row=(file_id, "u1", folder_id, "a.txt"))

    resource = await PostgresResourceRepository(conn).get(ResourceRef.file(file_id))

    assert resource.kind is ResourceKind.FILE
    assert resource.owner_id == "u1"
    assert resource.parent_ref == ResourceRef.folder(folder_id)
    assert "FROM file" in conn.execute.call_args.args[0]


@pytest.mark.asyncio
async def test_resource_repository_missing() -> None:
    conn = _conn(row=None)

    assert await PostgresResourceRepository(conn).get(ResourceRef.folder(uuid4())) is None


@pytest.mark.asyncio
async def test_principal_repository_maps_roles() -> None:
    conn = _conn(row=("u1", ["user", "admin"], True, "Ana", "ana@example.com"))

    principal = await PostgresPrincipalRepository(conn).get_by_id("u1")

    assert principal.is_admin
    assert principal.has_superadmin_override
    assert principal.email == "ana@example.com"


@pytest.mark.asyncio
async def test_grant_repository_maps_row() -> None:
    now = datetime.now(UTC)
    folder_id = uuid4()
    conn = _conn(row=(uuid4(), "u2", folder_id, "write", now, now, "u1"))

    grant = await PostgresGrantRepository(conn).get("u2", ResourceRef.folder(folder_id))

    assert grant.action is GrantAction.WRITE
    assert grant.resource == ResourceRef.folder(folder_id)
    assert grant.granted_by == "u1"


@pytest.mark.asyncio
async def test_grant_repository_create_unique_violation_is_conflict() -> None:
    conn = _conn()
    conn.execute = AsyncMock(side_effect=errors.UniqueViolation("duplicate key"))
    conn.transaction.return_value.__aexit__ = AsyncMock(return_value=False)
    now = datetime.now(UTC)
    grant = Grant(
        id=uuid4(),
        principal_id="u2",
        resource=ResourceRef.file(uuid4()),
        action=GrantAction.READ,
        created_at=now,
        updated_at=now,
    )

    with pytest.raises(Conflict):
        await PostgresGrantRepository(conn).create(grant)
