"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from sharedrive.domain.value_objects import ResourceKind
from sharedrive.interfaces.api.resources.access import AccessResource
from sharedrive.interfaces.api.resources.health import HealthResource
from sharedrive.interfaces.api.resources.permissions import (
    PermissionResource,
    PermissionsResource,
)
from sharedrive.interfaces.api.resources.shared import SharedResource

logger = logging.getLogger(__name__)

_PREFIXES = {
    ResourceKind.FOLDER: "/v1/folders",
    ResourceKind.FILE: "/v1/files",
}


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log the traceback of anything the resources did not map and answer 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    access_resources: dict[ResourceKind, AccessResource],
    permissions_resources: dict[ResourceKind, PermissionsResource],
    permission_resources: dict[ResourceKind, PermissionResource],
    shared_resource: SharedResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes for folders and files."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/shared", shared_resource)
    for kind, prefix in _PREFIXES.items():
        app.add_route(f"{prefix}/{{resource_id}}/access", access_resources[kind])
        app.add_route(f"{prefix}/{{resource_id}}/permissions", permissions_resources[kind])
        app.add_route(
            f"{prefix}/{{resource_id}}/permissions/{{user_id}}",
            permission_resources[kind],
        )
    app.add_error_handler(Exception, handle_unexpected_error)
    return app
