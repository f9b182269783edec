"""Application entry point and composition root."""

import logging

from sharedrive import __version__
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
from sharedrive.config import Settings, get_settings
from sharedrive.domain.value_objects import ResourceKind
from sharedrive.infrastructure.auth.keycloak_provider import KeycloakProvider
from sharedrive.infrastructure.permission.permission_checker import HierarchyPermissionChecker
from sharedrive.infrastructure.persistence.postgres.connection import create_pool
from sharedrive.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from sharedrive.interfaces.api.app import create_app
from sharedrive.interfaces.api.middleware.auth import AuthMiddleware
from sharedrive.interfaces.api.middleware.cors import CORSMiddleware
from sharedrive.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from sharedrive.interfaces.api.resources.access import AccessResource
from sharedrive.interfaces.api.resources.health import HealthResource
from sharedrive.interfaces.api.resources.permissions import (
    PermissionResource,
    PermissionsResource,
)
from sharedrive.interfaces.api.resources.shared import SharedResource

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"sharedrive v{__version__}")


def configure_logging(settings: Settings) -> None:
    """Configure root logging once from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_sharedrive_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("No Keycloak client secret configured, all requests are unauthenticated")

    permission_checker = HierarchyPermissionChecker(
        uow_factory, max_depth=settings.max_hierarchy_depth
    )
    check_access = CheckAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    list_permissions = ListPermissionsUseCase(unit_of_work_factory=uow_factory)
    get_permission = GetPermissionUseCase(unit_of_work_factory=uow_factory)
    grant_permission = GrantPermissionUseCase(unit_of_work_factory=uow_factory)
    change_permission = ChangePermissionUseCase(unit_of_work_factory=uow_factory)
    revoke_permission = RevokePermissionUseCase(unit_of_work_factory=uow_factory)
    list_shared = ListSharedWithMeUseCase(unit_of_work_factory=uow_factory)

    kinds = list(ResourceKind)
    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = create_app(
        access_resources={k: AccessResource(check_access, k) for k in kinds},
        permissions_resources={
            k: PermissionsResource(k, list_permissions, grant_permission) for k in kinds
        },
        permission_resources={
            k: PermissionResource(k, get_permission, change_permission, revoke_permission)
            for k in kinds
        },
        shared_resource=SharedResource(list_shared),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool, wait_timeout=settings.db_wait_timeout),
            AuthMiddleware(keycloak),
        ],
    )
    logger.info("sharedrive v%s ready (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server (sharedrive-serve)."""
    import uvicorn

    settings = get_settings()
    app = create_sharedrive_app()
    uvicorn.run(app, host=settings.host, port=settings.port)
