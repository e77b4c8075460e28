"""SQLAlchemy models for user groups and their memberships."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from notifyhub.infrastructure.database import Base
from notifyhub.utils import now_in_app_naive_datetime


class GroupModel(Base):
    """Database representation of a group managed by an administrator."""

    __tablename__ = "group"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(Integer, ForeignKey("tenant.id"), nullable=False, index=True)
    created_by_admin_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    memberships = relationship(
        "UserGroupModel",
        back_populates="group",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserGroupModel(Base):
    """Association between a user and a group."""

    __tablename__ = "group_member"
    __table_args__ = (UniqueConstraint("user_id", "group_id", name="uq_user_group_member"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    group_id = Column(
        Integer,
        ForeignKey("group.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    group = relationship("GroupModel", back_populates="memberships")


__all__ = ["GroupModel", "UserGroupModel"]
