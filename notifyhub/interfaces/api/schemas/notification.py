"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Priority = Literal["normal", "important", "urgent"]
TargetType = Literal["all", "users", "groups"]


class NotificationSendRequest(BaseModel):
    """Payload used to send a notification immediately."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    priority: Priority = "normal"
    target_type: TargetType
    target_ids: list[int] = Field(default_factory=list)
    image_url: str | None = Field(default=None, max_length=500)
    tenant_id: int | None = Field(
        default=None, description="Tenant destino; obligatorio para el propietario"
    )


class NotificationSendResponse(BaseModel):
    """Result of an immediate send."""

    notification_id: int
    deliveries: int


class NotificationRead(BaseModel):
    """Representation of a sent notification."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    tenant_id: int
    title: str
    content: str
    priority: str
    created_by: int
    target_type: str
    target_ids: list[int] = Field(default_factory=list)
    image_url: str | None = None
    is_scheduled: bool
    is_active: bool
    created_at: datetime | None = None


class NotificationPage(BaseModel):
    data: list[NotificationRead]
    total: int


__all__ = [
    "NotificationPage",
    "NotificationRead",
    "NotificationSendRequest",
    "NotificationSendResponse",
    "Priority",
    "TargetType",
]
