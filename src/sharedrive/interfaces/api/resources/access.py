"""Access check API resource."""

from uuid import UUID

import falcon.asgi

from sharedrive.application.use_cases.access.check_access import CheckAccessUseCase
from sharedrive.domain.exceptions import NotFound, Unauthenticated, ValidationError
from sharedrive.domain.value_objects import AccessDecision, ResourceKind, ResourceRef
from sharedrive.interfaces.api.resources.serializers import access_result_to_dict


class AccessResource:
    """GET /v1/{folders|files}/{id}/access?action=read&action=write - resolve access."""

    def __init__(self, check_access: CheckAccessUseCase, kind: ResourceKind) -> None:
        self._check_access = check_access
        self._kind = kind

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """Report whether the current user may perform any of the actions."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            ref = ResourceRef(self._kind, UUID(resource_id))
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid {self._kind.value} ID"}
            return

        actions = req.get_param_as_list("action") or []
        try:
            result = await self._check_access.execute(user.user_id, ref, actions)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except Unauthenticated:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        except NotFound as e:
            # An ancestor of the target is missing.
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = access_result_to_dict(result)
        if result.decision is AccessDecision.RESOURCE_NOT_FOUND:
            resp.status = falcon.HTTP_404
        else:
            resp.status = falcon.HTTP_200
