"""Delivery vocabulary and the inbox view of a delivery."""

from dataclasses import dataclass
from datetime import datetime

DELIVERY_STATUS_SENT = "sent"
DELIVERY_STATUS_DELIVERED = "delivered"
DELIVERY_STATUS_FAILED = "failed"

FEEDBACK_LIKED = "liked"
FEEDBACK_RENEW = "renew"
FEEDBACK_DISLIKED = "disliked"
FEEDBACK_VALUES = (FEEDBACK_LIKED, FEEDBACK_RENEW, FEEDBACK_DISLIKED)


@dataclass
class InboxItem:
    """Delivery joined with the notification content shown to its recipient."""

    delivery_id: int
    notification_id: int
    tenant_id: int
    title: str
    content: str
    priority: str
    image_url: str | None
    created_at: datetime | None
    is_read: bool
    read_at: datetime | None
    feedback: str | None
    feedback_at: datetime | None


__all__ = [
    "InboxItem",
    "DELIVERY_STATUS_SENT",
    "DELIVERY_STATUS_DELIVERED",
    "DELIVERY_STATUS_FAILED",
    "FEEDBACK_LIKED",
    "FEEDBACK_RENEW",
    "FEEDBACK_DISLIKED",
    "FEEDBACK_VALUES",
]
