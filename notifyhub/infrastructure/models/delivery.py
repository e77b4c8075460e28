"""SQLAlchemy model for per-recipient deliveries."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from notifyhub.infrastructure.database import Base


class DeliveryModel(Base):
    """Database representation of one recipient's copy of a notification."""

    __tablename__ = "delivery"
    __table_args__ = (
        UniqueConstraint("notification_id", "user_id", name="uq_delivery_notification_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(Integer, ForeignKey("tenant.id"), nullable=False, index=True)
    notification_id = Column(
        Integer, ForeignKey("notification.id"), nullable=False, index=True
    )
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="sent")
    delivered_at = Column(DateTime, nullable=True)
    read_at = Column(DateTime, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    error_message = Column(Text, nullable=True)
    feedback = Column(String(20), nullable=True)
    feedback_at = Column(DateTime, nullable=True)

    notification = relationship("NotificationModel", back_populates="deliveries")


__all__ = ["DeliveryModel"]
