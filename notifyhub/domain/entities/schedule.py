"""Domain entity representing a scheduled notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .notification import NotificationMessage

RECURRENCE_NONE = "none"
RECURRENCE_DAILY = "daily"
RECURRENCE_WEEKLY = "weekly"
RECURRENCE_MONTHLY = "monthly"
RECURRENCES = (RECURRENCE_NONE, RECURRENCE_DAILY, RECURRENCE_WEEKLY, RECURRENCE_MONTHLY)


@dataclass
class Schedule:
    """Notification template with a trigger time and optional recurrence."""

    id: int | None
    tenant_id: int
    title: str
    content: str
    priority: str
    created_by: int
    target_type: str
    scheduled_for: datetime
    target_ids: list[int] = field(default_factory=list)
    image_url: str | None = None
    recurrence: str = RECURRENCE_NONE
    is_active: bool = True
    last_executed_at: datetime | None = None
    created_at: datetime | None = None

    def is_due(self, now: datetime) -> bool:
        """Return ``True`` when the schedule should fire at ``now``."""

        return self.is_active and self.scheduled_for <= now

    def to_message(self) -> NotificationMessage:
        """Build the message that one occurrence of this schedule sends."""

        return NotificationMessage(
            tenant_id=self.tenant_id,
            title=self.title,
            content=self.content,
            priority=self.priority,
            created_by=self.created_by,
            target_type=self.target_type,
            target_ids=list(self.target_ids or []),
            image_url=self.image_url,
            is_scheduled=True,
        )


@dataclass(frozen=True)
class ScheduleAdvance:
    """Mutation applied to a schedule after a successful occurrence."""

    is_active: bool
    scheduled_for: datetime
    last_executed_at: datetime


__all__ = [
    "Schedule",
    "ScheduleAdvance",
    "RECURRENCES",
    "RECURRENCE_NONE",
    "RECURRENCE_DAILY",
    "RECURRENCE_WEEKLY",
    "RECURRENCE_MONTHLY",
]
