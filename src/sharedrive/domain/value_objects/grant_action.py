"""Actions a grant can carry."""

from collections.abc import Iterable
from enum import StrEnum


class GrantAction(StrEnum):
    """Discrete grant action. `write` does not imply `read`."""

    READ = "read"
    WRITE = "write"

    @classmethod
    def parse(cls, value: "str | GrantAction") -> "GrantAction":
        """Parse action name, raising ValidationError for unknown values."""
        from sharedrive.domain.exceptions import ValidationError

        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(a.value for a in cls)
            raise ValidationError(
                f"Invalid action {value!r}, expected one of: {allowed}"
            ) from None


def normalize_actions(
    actions: "str | GrantAction | Iterable[str | GrantAction]",
) -> frozenset[GrantAction]:
    """Normalize a single action or a collection of actions to a non-empty set."""
    from sharedrive.domain.exceptions import ValidationError

    if isinstance(actions, str):
        return frozenset({GrantAction.parse(actions)})
    result = frozenset(GrantAction.parse(a) for a in actions)
    if not result:
        raise ValidationError("At least one action is required")
    return result
