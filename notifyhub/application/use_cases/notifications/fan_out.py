"""Write one notification and its deliveries as a single unit."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from notifyhub.domain.entities import Notification, NotificationMessage
from notifyhub.domain.exceptions import EmptyAudienceError
from notifyhub.infrastructure.repositories import (
    DeliveryRepository,
    NotificationRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FanOutResult:
    """Notification written by a fan-out and the number of deliveries created."""

    notification: Notification
    recipients: int


def write_fan_out(
    session: Session,
    message: NotificationMessage,
    recipient_ids: Sequence[int],
    *,
    created_at: datetime | None = None,
) -> FanOutResult:
    """Insert the notification for ``message`` and one delivery per recipient.

    Runs inside the caller's transaction and never commits, so the caller decides
    whether the notification, its deliveries and any related change become
    visible together. Duplicate recipient ids are collapsed.
    """

    recipients = list(dict.fromkeys(int(user_id) for user_id in recipient_ids))
    if not recipients:
        raise EmptyAudienceError("A notification requires at least one recipient")

    notification = NotificationRepository(session).add(
        Notification(
            id=None,
            tenant_id=message.tenant_id,
            title=message.title,
            content=message.content,
            priority=message.priority,
            created_by=message.created_by,
            target_type=message.target_type,
            target_ids=list(message.target_ids),
            image_url=message.image_url,
            is_scheduled=message.is_scheduled,
            is_active=True,
            created_at=created_at,
        )
    )
    created = DeliveryRepository(session).bulk_add(
        tenant_id=message.tenant_id,
        notification_id=notification.id,
        user_ids=recipients,
    )
    logger.debug(
        "Prepared notification %s with %s deliveries for tenant %s",
        notification.id,
        created,
        message.tenant_id,
    )
    return FanOutResult(notification=notification, recipients=created)


__all__ = ["FanOutResult", "write_fan_out"]
