"""Use case for cancelling a schedule."""

import logging

from sqlalchemy.orm import Session

from notifyhub.domain.entities import User
from notifyhub.infrastructure.repositories import ScheduleRepository

logger = logging.getLogger(__name__)


def cancel_schedule(session: Session, schedule_id: int, *, actor: User) -> None:
    """Deactivate the schedule so it is never dispatched again."""

    repository = ScheduleRepository(session)
    schedule = repository.get(schedule_id)
    if schedule is None:
        raise ValueError("Agendamiento no encontrado")
    if not actor.is_owner() and schedule.created_by != actor.id:
        raise PermissionError("No autorizado")

    repository.deactivate(schedule_id)
    logger.info("User %s cancelled schedule %s", actor.id, schedule_id)
