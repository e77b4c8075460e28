"""Domain entity representing a dispatched notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

PRIORITY_NORMAL = "normal"
PRIORITY_IMPORTANT = "important"
PRIORITY_URGENT = "urgent"
PRIORITIES = (PRIORITY_NORMAL, PRIORITY_IMPORTANT, PRIORITY_URGENT)

TARGET_ALL = "all"
TARGET_USERS = "users"
TARGET_GROUPS = "groups"
TARGET_TYPES = (TARGET_ALL, TARGET_USERS, TARGET_GROUPS)


@dataclass
class NotificationMessage:
    """Content and targeting of a message about to be fanned out."""

    tenant_id: int
    title: str
    content: str
    priority: str
    created_by: int
    target_type: str
    target_ids: list[int] = field(default_factory=list)
    image_url: str | None = None
    is_scheduled: bool = False


@dataclass
class Notification:
    """Immutable record of one message sent to a resolved audience."""

    id: int | None
    tenant_id: int
    title: str
    content: str
    priority: str
    created_by: int
    target_type: str
    target_ids: list[int] = field(default_factory=list)
    image_url: str | None = None
    is_scheduled: bool = False
    is_active: bool = True
    created_at: datetime | None = None


__all__ = [
    "Notification",
    "NotificationMessage",
    "PRIORITIES",
    "PRIORITY_IMPORTANT",
    "PRIORITY_NORMAL",
    "PRIORITY_URGENT",
    "TARGET_ALL",
    "TARGET_GROUPS",
    "TARGET_TYPES",
    "TARGET_USERS",
]
