"""Shared-with-me API resource."""

import falcon.asgi

from sharedrive.application.use_cases.permission.list_permissions import (
    ListSharedWithMeUseCase,
)
from sharedrive.domain.exceptions import Unauthenticated
from sharedrive.domain.value_objects import ResourceKind
from sharedrive.interfaces.api.resources.serializers import grant_to_dict


class SharedResource:
    """GET /v1/shared - folders and files shared with the current user."""

    def __init__(self, list_shared: ListSharedWithMeUseCase) -> None:
        self._list_shared = list_shared

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            shared = await self._list_shared.execute(user.user_id)
        except Unauthenticated:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        resp.media = {
            "folders": [grant_to_dict(g) for g in shared[ResourceKind.FOLDER]],
            "files": [grant_to_dict(g) for g in shared[ResourceKind.FILE]],
        }
        resp.status = falcon.HTTP_200
