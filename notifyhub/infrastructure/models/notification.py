"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from notifyhub.infrastructure.database import Base
from notifyhub.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation of a dispatched message."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(Integer, ForeignKey("tenant.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    priority = Column(String(20), nullable=False, default="normal")
    created_by = Column(Integer, nullable=False)
    target_type = Column(String(20), nullable=False, default="all")
    target_ids = Column(JSON, nullable=False, default=list)
    image_url = Column(String(500), nullable=True)
    is_scheduled = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    deliveries = relationship("DeliveryModel", back_populates="notification")


__all__ = ["NotificationModel"]
