"""Principal entity - user making an access request."""

from dataclasses import dataclass, field

ADMIN_ROLE = "admin"
USER_ROLE = "user"


@dataclass
class Principal:
    """User identity with roles. is_superadmin only counts for admins."""

    id: str
    roles: frozenset[str] = field(default_factory=lambda: frozenset({USER_ROLE}))
    is_superadmin: bool = False
    name: str | None = None
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return ADMIN_ROLE in self.roles

    @property
    def has_superadmin_override(self) -> bool:
        return self.is_admin and self.is_superadmin
