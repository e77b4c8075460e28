"""SQLAlchemy model for the tenant table."""

from sqlalchemy import Column, DateTime, Integer, String

from notifyhub.infrastructure.database import Base
from notifyhub.utils import now_in_app_naive_datetime


class TenantModel(Base):
    """Database representation of a tenant."""

    __tablename__ = "tenant"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(100), nullable=False, unique=True)
    owner_id = Column(Integer, nullable=True)
    status = Column(String(20), nullable=False, default="active")
    plan = Column(String(20), nullable=False, default="basic")
    subscription_expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["TenantModel"]
