"""Shared lookups for grant management - only the owner manages grants."""

from sharedrive.domain.entities import Principal, Resource
from sharedrive.domain.exceptions import (
    NotFound,
    PermissionDenied,
    ResourceNotFound,
    Unauthenticated,
)
from sharedrive.domain.value_objects import ResourceRef


async def load_actor(uow, actor_id: str) -> Principal:
    """Load the acting user or raise Unauthenticated."""
    actor = await uow.principals.get_by_id(actor_id)
    if not actor:
        raise Unauthenticated(f"Unknown user {actor_id}")
    return actor


async def load_target(uow, target_id: str) -> Principal:
    """Load the user a grant is about or raise NotFound."""
    target = await uow.principals.get_by_id(target_id)
    if not target:
        raise NotFound(f"User {target_id} not found")
    return target


async def load_resource(uow, ref: ResourceRef) -> Resource:
    resource = await uow.resources.get(ref)
    if not resource:
        raise ResourceNotFound(ref)
    return resource


def require_owner(resource: Resource, actor: Principal) -> None:
    if resource.owner_id != actor.id:
        raise PermissionDenied(
            f"You do not have the authority to manage permissions on this {resource.kind.value}"
        )


def require_not_owner(resource: Resource, target: Principal) -> None:
    """Grants are never stored for the owner."""
    if resource.owner_id == target.id:
        raise PermissionDenied(f"User {target.id} is the owner of this {resource.kind.value}")


async def load_owned_resource(uow, actor: Principal, ref: ResourceRef) -> Resource:
    """Load resource and require the actor to own it."""
    resource = await load_resource(uow, ref)
    require_owner(resource, actor)
    return resource


async def load_managed_resource(
    uow, actor: Principal, target: Principal, ref: ResourceRef
) -> Resource:
    """Load resource whose grant for target the actor may manage.

    The target being the owner is reported before the actor's lack of authority.
    """
    resource = await load_resource(uow, ref)
    require_not_owner(resource, target)
    require_owner(resource, actor)
    return resource
