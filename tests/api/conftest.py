"""Fixtures for API tests."""

import pytest

from sharedrive.application.use_cases.access.check_access import CheckAccessUseCase
from sharedrive.application.use_cases.permission.change_permission import (
    ChangePermissionUseCase,
)
from sharedrive.application.use_cases.permission.grant_permission import (
    GrantPermissionUseCase,
)
from sharedrive.application.use_cases.permission.list_permissions import (
    GetPermissionUseCase,
    ListPermissionsUseCase,
    ListSharedWithMeUseCase,
)
from sharedrive.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from sharedrive.domain.value_objects import ResourceKind
from sharedrive.infrastructure.permission.permission_checker import HierarchyPermissionChecker
from sharedrive.interfaces.api.middleware.auth import RequestUser

from tests.conftest import FakeUnitOfWork, fake_pool, file, folder, user


class AuthBypassMiddleware:
    """Middleware that sets context.user from X-Test-User for testing."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = RequestUser(user_id=user_id) if user_id else None


@pytest.fixture
def tree(fake_uow: FakeUnitOfWork):
    """owner-1 has root <- docs <- notes.txt; user-2 and user-3 exist."""
    for principal_id in ("owner-1", "user-2", "user-3"):
        fake_uow.principals.add(user(principal_id))
    root = fake_uow.resources.add(folder("owner-1", name="root"))
    docs = fake_uow.resources.add(folder("owner-1", root, name="docs"))
    notes = fake_uow.resources.add(file("owner-1", docs, name="notes.txt"))
    return {"root": root, "docs": docs, "notes": notes}


@pytest.fixture
def app(uow_factory):
    """Falcon ASGI app with API resources for testing."""
    from sharedrive.interfaces.api.app import create_app
    from sharedrive.interfaces.api.resources.access import AccessResource
    from sharedrive.interfaces.api.resources.health import HealthResource
    from sharedrive.interfaces.api.resources.permissions import (
        PermissionResource,
        PermissionsResource,
    )
    from sharedrive.interfaces.api.resources.shared import SharedResource

    check_access = CheckAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=HierarchyPermissionChecker(uow_factory),
    )
    list_permissions = ListPermissionsUseCase(unit_of_work_factory=uow_factory)
    get_permission = GetPermissionUseCase(unit_of_work_factory=uow_factory)
    grant_permission = GrantPermissionUseCase(unit_of_work_factory=uow_factory)
    change_permission = ChangePermissionUseCase(unit_of_work_factory=uow_factory)
    revoke_permission = RevokePermissionUseCase(unit_of_work_factory=uow_factory)
    list_shared = ListSharedWithMeUseCase(unit_of_work_factory=uow_factory)

    kinds = list(ResourceKind)
    return create_app(
        access_resources={k: AccessResource(check_access, k) for k in kinds},
        permissions_resources={
            k: PermissionsResource(k, list_permissions, grant_permission) for k in kinds
        },
        permission_resources={
            k: PermissionResource(k, get_permission, change_permission, revoke_permission)
            for k in kinds
        },
        shared_resource=SharedResource(list_shared),
        health_resource=HealthResource(fake_pool()),
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
