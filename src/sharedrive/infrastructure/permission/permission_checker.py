"""Permission checker implementation - walks the folder hierarchy."""

import logging

from sharedrive.application.ports import Actions, UnitOfWorkFactory
from sharedrive.domain.entities import Principal, Resource
from sharedrive.domain.exceptions import HierarchyError, ResourceNotFound
from sharedrive.domain.value_objects import (
    AccessDecision,
    AccessResult,
    AccessRule,
    GrantAction,
    ResourceRef,
    normalize_actions,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


class HierarchyPermissionChecker:
    """Decides access to folders and files with one algorithm for both.

    At every node from the target up to its root folder, in order:
    ownership, superadmin override, plain admin veto, explicit grant.
    The first rule that matches decides. Reaching the root without a
    match denies.
    """

    def __init__(
        self, unit_of_work_factory: UnitOfWorkFactory, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be positive")
        self._uow_factory = unit_of_work_factory
        self._max_depth = max_depth

    async def check(self, principal: Principal, ref: ResourceRef, actions: Actions) -> bool:
        """Check if principal may perform any of actions on ref."""
        result = await self.resolve(principal, ref, actions)
        if result.decision is AccessDecision.RESOURCE_NOT_FOUND:
            raise ResourceNotFound(ref)
        return result.allowed

    async def resolve(
        self, principal: Principal, ref: ResourceRef, actions: Actions
    ) -> AccessResult:
        """Resolve access and report which rule decided and where."""
        wanted = normalize_actions(actions)
        async with self._uow_factory() as uow:
            target = await uow.resources.get(ref)
            if target is None:
                result = AccessResult(AccessDecision.RESOURCE_NOT_FOUND, AccessRule.NOT_FOUND)
            else:
                result = await self._walk(uow, principal, target, wanted)

        logger.debug(
            "Access %s for %s on %s (actions=%s, rule=%s, depth=%d)",
            result.decision.value,
            principal.id,
            ref,
            ",".join(sorted(a.value for a in wanted)),
            result.rule.value,
            result.depth,
        )
        return result

    async def _walk(
        self,
        uow,
        principal: Principal,
        target: Resource,
        wanted: frozenset[GrantAction],
    ) -> AccessResult:
        visited: set[ResourceRef] = set()
        node = target
        depth = 0
        while True:
            visited.add(node.ref)
            rule = await self._match(uow, principal, node, wanted)
            if rule is AccessRule.ADMIN_VETO:
                return AccessResult(AccessDecision.DENIED, rule, node.ref, depth)
            if rule is not None:
                return AccessResult(AccessDecision.ALLOWED, rule, node.ref, depth)

            parent_ref = node.parent_ref
            if parent_ref is None:
                return AccessResult(AccessDecision.DENIED, AccessRule.NO_MATCH, None, depth)
            if parent_ref in visited:
                logger.warning("Cycle in folder hierarchy at %s (target %s)", parent_ref, target.ref)
                raise HierarchyError(f"Cycle in folder hierarchy at {parent_ref}")
            depth += 1
            if depth > self._max_depth:
                logger.warning(
                    "Folder hierarchy above %s exceeds %d levels", target.ref, self._max_depth
                )
                raise HierarchyError(
                    f"Folder hierarchy above {target.ref} exceeds {self._max_depth} levels"
                )

            parent = await uow.resources.get(parent_ref)
            if parent is None:
                raise ResourceNotFound(parent_ref)
            node = parent

    @staticmethod
    async def _match(
        uow,
        principal: Principal,
        node: Resource,
        wanted: frozenset[GrantAction],
    ) -> AccessRule | None:
        """Rule that decides at this node, or None to continue with the parent."""
        if node.owner_id == principal.id:
            return AccessRule.OWNER
        if principal.has_superadmin_override:
            return AccessRule.SUPERADMIN
        if principal.is_admin:
            return AccessRule.ADMIN_VETO

        grant = await uow.grants.get(principal.id, node.ref)
        if grant and grant.action in wanted:
            return AccessRule.GRANT
        return None
