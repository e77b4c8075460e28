"""SQLAlchemy model for scheduled notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, JSON, String, Text

from notifyhub.infrastructure.database import Base
from notifyhub.utils import now_in_app_naive_datetime


class ScheduleModel(Base):
    """Database representation of a notification waiting for its trigger time."""

    __tablename__ = "schedule"
    __table_args__ = (Index("ix_schedule_due", "is_active", "scheduled_for"),)

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(Integer, ForeignKey("tenant.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    priority = Column(String(20), nullable=False, default="normal")
    created_by = Column(Integer, nullable=False)
    target_type = Column(String(20), nullable=False, default="all")
    target_ids = Column(JSON, nullable=False, default=list)
    image_url = Column(String(500), nullable=True)
    scheduled_for = Column(DateTime, nullable=False)
    recurrence = Column(String(20), nullable=False, default="none")
    is_active = Column(Boolean, nullable=False, default=True)
    last_executed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ScheduleModel"]
