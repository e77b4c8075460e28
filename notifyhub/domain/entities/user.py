"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLE_OWNER = "owner"


@dataclass
class User:
    """Core attributes describing a platform user."""

    id: int | None
    tenant_id: int | None
    created_by_admin_id: int | None
    name: str | None
    email: str | None
    role: str
    is_active: bool = True
    deleted: bool = False
    created_at: datetime | None = None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role.lower() == role.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user administers a tenant."""

        return self.has_role(ROLE_ADMIN)

    def is_owner(self) -> bool:
        """Return ``True`` when the user is the platform owner."""

        return self.has_role(ROLE_OWNER)


__all__ = ["User", "ROLE_USER", "ROLE_ADMIN", "ROLE_OWNER"]
