"""Response bodies shared by the API resources."""

from sharedrive.domain.entities import Grant
from sharedrive.domain.value_objects import AccessResult


def grant_to_dict(grant: Grant) -> dict:
    return {
        "id": str(grant.id),
        "user_id": grant.principal_id,
        "resource_kind": grant.resource.kind.value,
        "resource_id": str(grant.resource.id),
        "action": grant.action.value,
        "granted_by": grant.granted_by,
        "created_at": grant.created_at.isoformat(),
        "updated_at": grant.updated_at.isoformat(),
    }


def access_result_to_dict(result: AccessResult) -> dict:
    return {
        "decision": result.decision.value,
        "rule": result.rule.value,
        "decided_at": str(result.decided_at) if result.decided_at else None,
        "depth": result.depth,
        "inherited": result.inherited,
    }
