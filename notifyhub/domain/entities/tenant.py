"""Domain entity representing a tenant."""

from dataclasses import dataclass
from datetime import datetime

TENANT_STATUS_ACTIVE = "active"
TENANT_STATUS_SUSPENDED = "suspended"
TENANT_STATUS_EXPIRED = "expired"


@dataclass
class Tenant:
    """Isolated customer organization owning users, groups and messages."""

    id: int | None
    name: str
    slug: str
    status: str
    plan: str
    subscription_expires_at: datetime | None = None
    created_at: datetime | None = None


__all__ = [
    "Tenant",
    "TENANT_STATUS_ACTIVE",
    "TENANT_STATUS_SUSPENDED",
    "TENANT_STATUS_EXPIRED",
]
