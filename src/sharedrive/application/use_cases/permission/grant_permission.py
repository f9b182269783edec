"""Grant permission use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from sharedrive.application.ports import UnitOfWorkFactory
from sharedrive.application.use_cases.permission.ownership import (
    load_actor,
    load_resource,
    load_target,
    require_not_owner,
    require_owner,
)
from sharedrive.domain.entities import Grant
from sharedrive.domain.exceptions import Conflict, PermissionDenied
from sharedrive.domain.value_objects import GrantAction, ResourceRef

logger = logging.getLogger(__name__)


class GrantPermissionUseCase:
    """Grant read or write on a folder or file to another user."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        target_id: str,
        ref: ResourceRef,
        action: str | GrantAction,
    ) -> Grant:
        """Create grant. Actor must own the resource; target must not."""
        action = GrantAction.parse(action)

        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            target = await load_target(uow, target_id)
            resource = await load_resource(uow, ref)
            if resource.is_root:
                logger.warning(
                    "User %s tried to share root folder %s with %s", actor.id, ref, target.id
                )
                raise PermissionDenied("Root folders cannot be shared")
            require_not_owner(resource, target)
            require_owner(resource, actor)

            existing = await uow.grants.get(target.id, ref)
            if existing:
                raise Conflict(
                    f"User {target.id} already has {existing.action.value} permission on {ref}"
                )

            now = datetime.now(UTC)
            grant = Grant(
                id=uuid4(),
                principal_id=target.id,
                resource=ref,
                action=action,
                created_at=now,
                updated_at=now,
                granted_by=actor.id,
            )
            await uow.grants.create(grant)

        logger.info("Granted %s on %s to %s by %s", action.value, ref, target.id, actor.id)
        return grant
