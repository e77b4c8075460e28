"""Use case for listing sent notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifyhub.domain.entities import Notification, User
from notifyhub.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    viewer: User,
    tenant_id: int | None = None,
    limit: int = 100,
    offset: int = 0,
) -> tuple[Sequence[Notification], int]:
    """Return the notifications visible to ``viewer`` and the total count.

    Administrators always see their own tenant; the owner may filter by tenant
    or list everything.
    """

    if viewer.is_owner():
        effective_tenant_id = tenant_id
    elif viewer.is_admin():
        if viewer.tenant_id is None:
            raise ValueError("Tenant no definido")
        effective_tenant_id = viewer.tenant_id
    else:
        raise ValueError("Solo administradores pueden consultar los envíos")

    return NotificationRepository(session).list_for_tenant(
        effective_tenant_id, limit=limit, offset=offset
    )
