"""Persistence helpers for deliveries and the recipient inbox."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func, insert
from sqlalchemy.orm import Session

from notifyhub.domain.entities import DELIVERY_STATUS_SENT, InboxItem
from notifyhub.infrastructure.models import DeliveryModel, NotificationModel
from notifyhub.utils import ensure_app_naive_datetime, ensure_app_timezone


class DeliveryRepository:
    """Write deliveries and serve the recipient inbox."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def bulk_add(
        self, *, tenant_id: int, notification_id: int, user_ids: Sequence[int]
    ) -> int:
        """Insert one ``sent`` delivery per user id in a single statement.

        The caller owns the transaction; nothing is committed here.
        """

        rows = [
            {
                "tenant_id": tenant_id,
                "notification_id": notification_id,
                "user_id": user_id,
                "status": DELIVERY_STATUS_SENT,
                "is_read": False,
            }
            for user_id in user_ids
        ]
        if not rows:
            return 0
        self.session.execute(insert(DeliveryModel), rows)
        return len(rows)

    def list_inbox(
        self, user_id: int, *, limit: int = 50, offset: int = 0
    ) -> tuple[Sequence[InboxItem], int]:
        """Return a page of the user's inbox and its total size."""

        query = (
            self._inbox(self.session.query(DeliveryModel, NotificationModel), user_id)
            .order_by(DeliveryModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        total = self._inbox(
            self.session.query(func.count(DeliveryModel.id)), user_id
        ).scalar()
        items = [
            self._to_inbox_item(delivery, notification)
            for delivery, notification in query.all()
        ]
        return items, int(total or 0)

    def count_unread(self, user_id: int) -> int:
        total = (
            self._inbox(self.session.query(func.count(DeliveryModel.id)), user_id)
            .filter(DeliveryModel.is_read.is_(False))
            .scalar()
        )
        return int(total or 0)

    def mark_as_read(self, delivery_id: int, *, user_id: int, read_at: datetime) -> bool:
        """Flag the user's delivery as read; return ``False`` if it is not theirs."""

        model = self._get_owned(delivery_id, user_id)
        if model is None:
            return False
        if not model.is_read:
            model.is_read = True
            model.read_at = ensure_app_naive_datetime(read_at)
            self.session.add(model)
            self.session.commit()
        return True

    def set_feedback(
        self, delivery_id: int, *, user_id: int, feedback: str, feedback_at: datetime
    ) -> bool:
        model = self._get_owned(delivery_id, user_id)
        if model is None:
            return False
        model.feedback = feedback
        model.feedback_at = ensure_app_naive_datetime(feedback_at)
        self.session.add(model)
        self.session.commit()
        return True

    @staticmethod
    def _inbox(query, user_id: int):
        """Restrict ``query`` to the user's deliveries of same-tenant notifications."""

        return (
            query.join(NotificationModel, DeliveryModel.notification_id == NotificationModel.id)
            .filter(DeliveryModel.user_id == user_id)
            .filter(DeliveryModel.tenant_id == NotificationModel.tenant_id)
        )

    def _get_owned(self, delivery_id: int, user_id: int) -> DeliveryModel | None:
        return (
            self.session.query(DeliveryModel)
            .filter(DeliveryModel.id == delivery_id)
            .filter(DeliveryModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _to_inbox_item(
        delivery: DeliveryModel, notification: NotificationModel
    ) -> InboxItem:
        return InboxItem(
            delivery_id=delivery.id,
            notification_id=notification.id,
            tenant_id=notification.tenant_id,
            title=notification.title,
            content=notification.content,
            priority=notification.priority,
            image_url=notification.image_url,
            created_at=ensure_app_timezone(notification.created_at),
            is_read=bool(delivery.is_read),
            read_at=ensure_app_timezone(delivery.read_at),
            feedback=delivery.feedback,
            feedback_at=ensure_app_timezone(delivery.feedback_at),
        )


__all__ = ["DeliveryRepository"]
