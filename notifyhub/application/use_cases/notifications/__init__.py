"""Use cases for composing and sending notifications."""

from .fan_out import FanOutResult, write_fan_out
from .list_notifications import list_notifications
from .send_notification import resolve_sender_scope, send_notification

__all__ = [
    "FanOutResult",
    "list_notifications",
    "resolve_sender_scope",
    "send_notification",
    "write_fan_out",
]
