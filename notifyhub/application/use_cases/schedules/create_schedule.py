"""Use case for scheduling a notification."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from notifyhub.application.use_cases.audience import resolve_audience
from notifyhub.application.use_cases.notifications import resolve_sender_scope
from notifyhub.domain.entities import RECURRENCES, Schedule, User
from notifyhub.infrastructure.repositories import ScheduleRepository
from notifyhub.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)


def create_schedule(
    session: Session,
    *,
    creator: User,
    title: str,
    content: str,
    priority: str,
    target_type: str,
    scheduled_for: datetime,
    target_ids: Sequence[int] = (),
    recurrence: str = "none",
    image_url: str | None = None,
    tenant_id: int | None = None,
) -> Schedule:
    """Persist a schedule after checking the creator may reach its targets.

    Explicit selections are validated now so that obvious mistakes are
    reported to the creator instead of failing at dispatch time.
    """

    if recurrence not in RECURRENCES:
        raise ValueError("Recurrencia no permitida")

    scope_tenant_id, admin_id = resolve_sender_scope(session, creator, tenant_id=tenant_id)
    resolve_audience(
        session,
        tenant_id=scope_tenant_id,
        target_type=target_type,
        target_ids=target_ids,
        admin_id=admin_id,
    )

    schedule = ScheduleRepository(session).create(
        Schedule(
            id=None,
            tenant_id=scope_tenant_id,
            title=title,
            content=content,
            priority=priority,
            created_by=creator.id,
            target_type=target_type,
            target_ids=list(dict.fromkeys(int(target_id) for target_id in target_ids)),
            image_url=image_url,
            scheduled_for=ensure_app_timezone(scheduled_for),
            recurrence=recurrence,
            is_active=True,
            created_at=now_in_app_timezone(),
        )
    )
    logger.info(
        "User %s scheduled notification %s for %s (%s)",
        creator.id,
        schedule.id,
        schedule.scheduled_for.isoformat(),
        schedule.recurrence,
    )
    return schedule
