"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from notifyhub.domain.entities import Notification
from notifyhub.infrastructure.models import NotificationModel
from notifyhub.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide persistence operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, notification: Notification) -> Notification:
        """Insert ``notification`` and flush it to obtain its id.

        The caller owns the transaction; nothing is committed here.
        """

        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def list_for_tenant(
        self,
        tenant_id: int | None,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> tuple[Sequence[Notification], int]:
        """Return a page of sent notifications and the total count.

        ``tenant_id=None`` lists every tenant.
        """

        query = self.session.query(NotificationModel)
        count_query = self.session.query(func.count(NotificationModel.id))
        if tenant_id is not None:
            query = query.filter(NotificationModel.tenant_id == tenant_id)
            count_query = count_query.filter(NotificationModel.tenant_id == tenant_id)
        query = (
            query.order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        total = count_query.scalar() or 0
        return [self._to_entity(model) for model in query.all()], int(total)

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        model.tenant_id = notification.tenant_id
        model.title = notification.title
        model.content = notification.content
        model.priority = notification.priority
        model.created_by = notification.created_by
        model.target_type = notification.target_type
        model.target_ids = list(notification.target_ids or [])
        model.image_url = notification.image_url
        model.is_scheduled = notification.is_scheduled
        model.is_active = notification.is_active

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            tenant_id=model.tenant_id,
            title=model.title,
            content=model.content,
            priority=model.priority,
            created_by=model.created_by,
            target_type=model.target_type,
            target_ids=[int(target_id) for target_id in (model.target_ids or [])],
            image_url=model.image_url,
            is_scheduled=bool(model.is_scheduled),
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
