"""Pydantic models for the recipient inbox."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class InboxItemRead(BaseModel):
    """Delivery shown to its recipient together with the message content."""

    model_config = ConfigDict(from_attributes=True)

    delivery_id: int
    notification_id: int
    tenant_id: int
    title: str
    content: str
    priority: str
    image_url: str | None = None
    created_at: datetime | None = None
    is_read: bool
    read_at: datetime | None = None
    feedback: str | None = None
    feedback_at: datetime | None = None


class InboxPage(BaseModel):
    data: list[InboxItemRead]
    total: int


class UnreadCount(BaseModel):
    count: int


class FeedbackRequest(BaseModel):
    """Reaction left by a recipient on a delivery."""

    feedback: Literal["liked", "renew", "disliked"]


__all__ = ["FeedbackRequest", "InboxItemRead", "InboxPage", "UnreadCount"]
