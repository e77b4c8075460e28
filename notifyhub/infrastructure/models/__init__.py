"""ORM models used by the application infrastructure."""

from .tenant import TenantModel
from .user import UserModel
from .group import GroupModel, UserGroupModel
from .schedule import ScheduleModel
from .notification import NotificationModel
from .delivery import DeliveryModel

__all__ = [
    "DeliveryModel",
    "GroupModel",
    "NotificationModel",
    "ScheduleModel",
    "TenantModel",
    "UserGroupModel",
    "UserModel",
]
