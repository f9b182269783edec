"""Outcome of an access check."""

from dataclasses import dataclass
from enum import StrEnum

from sharedrive.domain.value_objects.resource_ref import ResourceRef


class AccessDecision(StrEnum):
    """Allowed, denied, or the target does not exist."""

    ALLOWED = "allowed"
    DENIED = "denied"
    RESOURCE_NOT_FOUND = "resource_not_found"


class AccessRule(StrEnum):
    """Rule that produced the decision."""

    OWNER = "owner"
    SUPERADMIN = "superadmin"
    ADMIN_VETO = "admin_veto"
    GRANT = "grant"
    NO_MATCH = "no_match"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class AccessResult:
    """Decision plus the node where it was reached.

    depth is 0 for the target itself, 1 for its parent, and so on.
    """

    decision: AccessDecision
    rule: AccessRule
    decided_at: ResourceRef | None = None
    depth: int = 0

    @property
    def allowed(self) -> bool:
        return self.decision is AccessDecision.ALLOWED

    @property
    def inherited(self) -> bool:
        return self.allowed and self.depth > 0
