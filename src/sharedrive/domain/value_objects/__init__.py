"""Domain value objects."""

from sharedrive.domain.value_objects.access_decision import (
    AccessDecision,
    AccessResult,
    AccessRule,
)
from sharedrive.domain.value_objects.grant_action import GrantAction, normalize_actions
from sharedrive.domain.value_objects.resource_kind import ResourceKind
from sharedrive.domain.value_objects.resource_ref import ResourceRef

__all__ = [
    "AccessDecision",
    "AccessResult",
    "AccessRule",
    "GrantAction",
    "ResourceKind",
    "ResourceRef",
    "normalize_actions",
]
