"""Domain entities exposed by the application."""

from .delivery import (
    DELIVERY_STATUS_DELIVERED,
    DELIVERY_STATUS_FAILED,
    DELIVERY_STATUS_SENT,
    FEEDBACK_VALUES,
    InboxItem,
)
from .dispatch import (
    OUTCOME_EMPTY,
    OUTCOME_SENT,
    OUTCOME_SKIPPED,
    DispatchCycleResult,
    DispatchFailure,
    DueSchedule,
    ScheduleDispatchOutcome,
)
from .notification import (
    PRIORITIES,
    TARGET_ALL,
    TARGET_GROUPS,
    TARGET_TYPES,
    TARGET_USERS,
    Notification,
    NotificationMessage,
)
from .schedule import (
    RECURRENCE_DAILY,
    RECURRENCE_MONTHLY,
    RECURRENCE_NONE,
    RECURRENCE_WEEKLY,
    RECURRENCES,
    Schedule,
    ScheduleAdvance,
)
from .tenant import Tenant
from .user import ROLE_ADMIN, ROLE_OWNER, ROLE_USER, User

__all__ = [
    "DELIVERY_STATUS_DELIVERED",
    "DELIVERY_STATUS_FAILED",
    "DELIVERY_STATUS_SENT",
    "DispatchCycleResult",
    "DispatchFailure",
    "DueSchedule",
    "FEEDBACK_VALUES",
    "InboxItem",
    "Notification",
    "NotificationMessage",
    "OUTCOME_EMPTY",
    "OUTCOME_SENT",
    "OUTCOME_SKIPPED",
    "PRIORITIES",
    "RECURRENCES",
    "RECURRENCE_DAILY",
    "RECURRENCE_MONTHLY",
    "RECURRENCE_NONE",
    "RECURRENCE_WEEKLY",
    "ROLE_ADMIN",
    "ROLE_OWNER",
    "ROLE_USER",
    "Schedule",
    "ScheduleAdvance",
    "ScheduleDispatchOutcome",
    "TARGET_ALL",
    "TARGET_GROUPS",
    "TARGET_TYPES",
    "TARGET_USERS",
    "Tenant",
    "User",
]
