"""List and get permission use cases."""

from sharedrive.application.ports import UnitOfWorkFactory
from sharedrive.application.use_cases.permission.ownership import (
    load_actor,
    load_owned_resource,
    load_target,
)
from sharedrive.domain.entities import Grant
from sharedrive.domain.value_objects import ResourceKind, ResourceRef


class ListPermissionsUseCase:
    """All grants on a folder or file. Owner only."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, ref: ResourceRef) -> list[Grant]:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            await load_owned_resource(uow, actor, ref)
            grants = await uow.grants.list_for_resource(ref)
        return sorted(grants, key=lambda g: g.created_at)


class GetPermissionUseCase:
    """Grant of one user on a folder or file. Owner only."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, target_id: str, ref: ResourceRef) -> Grant | None:
        """None when target is the owner or holds no grant."""
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            target = await load_target(uow, target_id)
            resource = await load_owned_resource(uow, actor, ref)
            if resource.owner_id == target.id:
                return None
            return await uow.grants.get(target.id, ref)


class ListSharedWithMeUseCase:
    """Grants held by the acting user, split into folders and files."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str) -> dict[ResourceKind, list[Grant]]:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            grants = await uow.grants.list_for_principal(actor.id)

        shared: dict[ResourceKind, list[Grant]] = {kind: [] for kind in ResourceKind}
        for grant in sorted(grants, key=lambda g: g.created_at, reverse=True):
            shared[grant.resource.kind].append(grant)
        return shared
