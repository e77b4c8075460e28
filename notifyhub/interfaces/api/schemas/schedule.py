"""Pydantic models for scheduled notifications and dispatch runs."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .notification import Priority, TargetType

Recurrence = Literal["none", "daily", "weekly", "monthly"]


class ScheduleCreate(BaseModel):
    """Payload required to schedule a notification."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    priority: Priority = "normal"
    target_type: TargetType
    target_ids: list[int] = Field(default_factory=list)
    image_url: str | None = Field(default=None, max_length=500)
    scheduled_for: datetime
    recurrence: Recurrence = "none"
    tenant_id: int | None = None


class ScheduleRead(BaseModel):
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
    scheduled_for: datetime
    recurrence: str
    is_active: bool
    last_executed_at: datetime | None = None
    created_at: datetime | None = None


class DispatchFailureRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    schedule_id: int
    error: str


class DispatchCycleRead(BaseModel):
    """Summary of a dispatch cycle."""

    model_config = ConfigDict(from_attributes=True)

    processed: int
    succeeded: int
    skipped: int
    failed: list[DispatchFailureRead] = Field(default_factory=list)


__all__ = [
    "DispatchCycleRead",
    "DispatchFailureRead",
    "Recurrence",
    "ScheduleCreate",
    "ScheduleRead",
]
