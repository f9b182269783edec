"""Change permission use case."""

import logging
from datetime import UTC, datetime

from sharedrive.application.ports import UnitOfWorkFactory
from sharedrive.application.use_cases.permission.ownership import (
    load_actor,
    load_managed_resource,
    load_target,
)
from sharedrive.domain.entities import Grant
from sharedrive.domain.exceptions import NotFound
from sharedrive.domain.value_objects import GrantAction, ResourceRef

logger = logging.getLogger(__name__)


class ChangePermissionUseCase:
    """Overwrite the action of an existing grant."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        target_id: str,
        ref: ResourceRef,
        action: str | GrantAction,
    ) -> Grant:
        action = GrantAction.parse(action)

        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            target = await load_target(uow, target_id)
            await load_managed_resource(uow, actor, target, ref)

            grant = await uow.grants.get(target.id, ref)
            if not grant:
                raise NotFound(f"Grant for user {target.id} on {ref} not found")
            previous = grant.action
            grant.action = action
            grant.updated_at = datetime.now(UTC)
            await uow.grants.update(grant)

        logger.info(
            "Changed permission of %s on %s from %s to %s",
            target.id,
            ref,
            previous.value,
            action.value,
        )
        return grant
