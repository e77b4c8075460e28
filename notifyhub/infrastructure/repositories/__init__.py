"""Repository implementations for infrastructure layer."""

from .delivery_repository import DeliveryRepository
from .group_repository import GroupRepository
from .notification_repository import NotificationRepository
from .schedule_repository import ScheduleRepository
from .tenant_repository import TenantRepository
from .user_repository import UserRepository

__all__ = [
    "DeliveryRepository",
    "GroupRepository",
    "NotificationRepository",
    "ScheduleRepository",
    "TenantRepository",
    "UserRepository",
]
