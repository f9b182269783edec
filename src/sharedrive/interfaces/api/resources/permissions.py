"""Permissions API resources - grant, change, revoke and list grants."""

from uuid import UUID

import falcon.asgi

from sharedrive.application.use_cases.permission.change_permission import (
    ChangePermissionUseCase,
)
from sharedrive.application.use_cases.permission.grant_permission import (
    GrantPermissionUseCase,
)
from sharedrive.application.use_cases.permission.list_permissions import (
    GetPermissionUseCase,
    ListPermissionsUseCase,
)
from sharedrive.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from sharedrive.domain.exceptions import (
    Conflict,
    NotFound,
    PermissionDenied,
    Unauthenticated,
    ValidationError,
)
from sharedrive.domain.value_objects import ResourceKind, ResourceRef
from sharedrive.interfaces.api.resources.serializers import grant_to_dict


def _error(resp: falcon.asgi.Response, status: str, message: str) -> None:
    resp.status = status
    resp.media = {"error": message}


def _map_error(resp: falcon.asgi.Response, e: Exception) -> None:
    """Map a domain exception to an error response."""
    if isinstance(e, Unauthenticated):
        _error(resp, falcon.HTTP_401, "Unauthorized")
    elif isinstance(e, PermissionDenied):
        _error(resp, falcon.HTTP_403, str(e) or "Permission denied")
    elif isinstance(e, NotFound):
        _error(resp, falcon.HTTP_404, str(e))
    elif isinstance(e, Conflict):
        _error(resp, falcon.HTTP_409, str(e))
    else:
        _error(resp, falcon.HTTP_400, str(e))


_DOMAIN_ERRORS = (Unauthenticated, PermissionDenied, NotFound, Conflict, ValidationError)


class _KindResource:
    def __init__(self, kind: ResourceKind) -> None:
        self._kind = kind

    def _ref(self, resp: falcon.asgi.Response, resource_id: str) -> ResourceRef | None:
        try:
            return ResourceRef(self._kind, UUID(resource_id))
        except ValueError:
            _error(resp, falcon.HTTP_400, f"Invalid {self._kind.value} ID")
            return None


class PermissionsResource(_KindResource):
    """GET/POST /v1/{folders|files}/{id}/permissions - list and grant permissions."""

    def __init__(
        self,
        kind: ResourceKind,
        list_permissions: ListPermissionsUseCase,
        grant_permission: GrantPermissionUseCase,
    ) -> None:
        super().__init__(kind)
        self._list = list_permissions
        self._grant = grant_permission

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """List grants on the folder or file."""
        user = getattr(req.context, "user", None)
        if not user:
            _error(resp, falcon.HTTP_401, "Unauthorized")
            return
        ref = self._ref(resp, resource_id)
        if ref is None:
            return

        try:
            grants = await self._list.execute(user.user_id, ref)
        except _DOMAIN_ERRORS as e:
            _map_error(resp, e)
            return

        resp.media = {"items": [grant_to_dict(g) for g in grants]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """Grant an action to a user."""
        user = getattr(req.context, "user", None)
        if not user:
            _error(resp, falcon.HTTP_401, "Unauthorized")
            return
        ref = self._ref(resp, resource_id)
        if ref is None:
            return

        try:
            body = await req.get_media()
            target_id = body["user_id"]
            action = body["action"]
        except (KeyError, TypeError) as e:
            _error(resp, falcon.HTTP_400, f"Missing required field: {e}")
            return
        if not isinstance(target_id, str):
            _error(resp, falcon.HTTP_400, "user_id must be a string")
            return

        try:
            grant = await self._grant.execute(user.user_id, target_id, ref, action)
        except _DOMAIN_ERRORS as e:
            _map_error(resp, e)
            return

        resp.media = grant_to_dict(grant)
        resp.status = falcon.HTTP_201


class PermissionResource(_KindResource):
    """GET/PUT/DELETE /v1/{folders|files}/{id}/permissions/{user_id}."""

    def __init__(
        self,
        kind: ResourceKind,
        get_permission: GetPermissionUseCase,
        change_permission: ChangePermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
    ) -> None:
        super().__init__(kind)
        self._get = get_permission
        self._change = change_permission
        self._revoke = revoke_permission

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        user_id: str,
    ) -> None:
        """Get grant of one user. 200 with null grant when the user holds none."""
        user = getattr(req.context, "user", None)
        if not user:
            _error(resp, falcon.HTTP_401, "Unauthorized")
            return
        ref = self._ref(resp, resource_id)
        if ref is None:
            return

        try:
            grant = await self._get.execute(user.user_id, user_id, ref)
        except _DOMAIN_ERRORS as e:
            _map_error(resp, e)
            return

        resp.media = {"grant": grant_to_dict(grant) if grant else None}
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        user_id: str,
    ) -> None:
        """Change the action of an existing grant."""
        user = getattr(req.context, "user", None)
        if not user:
            _error(resp, falcon.HTTP_401, "Unauthorized")
            return
        ref = self._ref(resp, resource_id)
        if ref is None:
            return

        try:
            body = await req.get_media()
            action = body["action"]
        except (KeyError, TypeError) as e:
            _error(resp, falcon.HTTP_400, f"Missing required field: {e}")
            return

        try:
            grant = await self._change.execute(user.user_id, user_id, ref, action)
        except _DOMAIN_ERRORS as e:
            _map_error(resp, e)
            return

        resp.media = grant_to_dict(grant)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        user_id: str,
    ) -> None:
        """Revoke the grant of one user."""
        user = getattr(req.context, "user", None)
        if not user:
            _error(resp, falcon.HTTP_401, "Unauthorized")
            return
        ref = self._ref(resp, resource_id)
        if ref is None:
            return

        try:
            await self._revoke.execute(user.user_id, user_id, ref)
        except _DOMAIN_ERRORS as e:
            _map_error(resp, e)
            return

        resp.status = falcon.HTTP_204
