from .inbox import FeedbackRequest, InboxItemRead, InboxPage, UnreadCount
from .notification import (
    NotificationPage,
    NotificationRead,
    NotificationSendRequest,
    NotificationSendResponse,
)
from .schedule import (
    DispatchCycleRead,
    DispatchFailureRead,
    ScheduleCreate,
    ScheduleRead,
)

__all__ = [
    "DispatchCycleRead",
    "DispatchFailureRead",
    "FeedbackRequest",
    "InboxItemRead",
    "InboxPage",
    "NotificationPage",
    "NotificationRead",
    "NotificationSendRequest",
    "NotificationSendResponse",
    "ScheduleCreate",
    "ScheduleRead",
    "UnreadCount",
]
