"""Use case for sending a notification immediately."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifyhub.application.use_cases.audience import resolve_audience
from notifyhub.domain.entities import NotificationMessage, User
from notifyhub.infrastructure.repositories import TenantRepository

from .fan_out import FanOutResult, write_fan_out

logger = logging.getLogger(__name__)


def resolve_sender_scope(
    session: Session, sender: User, *, tenant_id: int | None = None
) -> tuple[int, int | None]:
    """Return the ``(tenant_id, admin_id)`` scope a sender may target.

    Administrators are confined to their own tenant and users; the owner must
    name an existing tenant and reaches all of its users.
    """

    if sender.is_admin():
        if sender.tenant_id is None:
            raise ValueError("Tenant no definido")
        if tenant_id is not None and tenant_id != sender.tenant_id:
            raise ValueError("No autorizado para este tenant")
        return sender.tenant_id, sender.id
    if sender.is_owner():
        if tenant_id is None:
            raise ValueError("Seleccione un tenant")
        if TenantRepository(session).get(tenant_id) is None:
            raise ValueError("Tenant no encontrado")
        return tenant_id, None
    raise ValueError("Solo administradores pueden enviar notificaciones")


def send_notification(
    session: Session,
    *,
    sender: User,
    title: str,
    content: str,
    priority: str,
    target_type: str,
    target_ids: Sequence[int] = (),
    image_url: str | None = None,
    tenant_id: int | None = None,
) -> FanOutResult:
    """Resolve the audience and persist the notification with its deliveries."""

    scope_tenant_id, admin_id = resolve_sender_scope(session, sender, tenant_id=tenant_id)
    message = NotificationMessage(
        tenant_id=scope_tenant_id,
        title=title,
        content=content,
        priority=priority,
        created_by=sender.id,
        target_type=target_type,
        target_ids=list(target_ids),
        image_url=image_url,
        is_scheduled=False,
    )

    try:
        recipients = resolve_audience(
            session,
            tenant_id=scope_tenant_id,
            target_type=target_type,
            target_ids=message.target_ids,
            admin_id=admin_id,
        )
        result = write_fan_out(session, message, recipients)
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(
        "User %s sent notification %s to %s recipients in tenant %s",
        sender.id,
        result.notification.id,
        result.recipients,
        scope_tenant_id,
    )
    return result


__all__ = ["resolve_sender_scope", "send_notification"]
