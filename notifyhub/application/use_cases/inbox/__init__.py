"""Use cases for the recipient inbox."""

from .list_inbox import count_unread, list_inbox
from .mark_as_read import mark_as_read
from .set_feedback import set_feedback

__all__ = ["count_unread", "list_inbox", "mark_as_read", "set_feedback"]
