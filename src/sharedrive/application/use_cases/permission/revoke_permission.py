"""Revoke permission use case."""

import logging

from sharedrive.application.ports import UnitOfWorkFactory
from sharedrive.application.use_cases.permission.ownership import (
    load_actor,
    load_managed_resource,
    load_target,
)
from sharedrive.domain.exceptions import NotFound
from sharedrive.domain.value_objects import ResourceRef

logger = logging.getLogger(__name__)


class RevokePermissionUseCase:
    """Remove a user's grant on a folder or file."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, target_id: str, ref: ResourceRef) -> None:
        """Revoke grant for target on ref. Actor must own the resource."""
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            target = await load_target(uow, target_id)
            await load_managed_resource(uow, actor, target, ref)

            grant = await uow.grants.get(target.id, ref)
            if not grant:
                raise NotFound(f"Grant for user {target.id} on {ref} not found")
            await uow.grants.delete(grant.id, ref.kind)

        logger.info("Revoked %s on %s from %s", grant.action.value, ref, target.id)
