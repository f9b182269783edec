"""Check access use case."""

from sharedrive.application.ports import Actions, PermissionChecker, UnitOfWorkFactory
from sharedrive.application.use_cases.permission.ownership import load_actor
from sharedrive.domain.value_objects import AccessResult, ResourceRef


class CheckAccessUseCase:
    """Resolve whether the acting user may read or write a folder or file."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, ref: ResourceRef, actions: Actions) -> AccessResult:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
        return await self._permission_checker.resolve(actor, ref, actions)
