"""Use case for listing schedules."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifyhub.domain.entities import Schedule, User
from notifyhub.infrastructure.repositories import ScheduleRepository


def list_schedules(
    session: Session,
    *,
    viewer: User,
    tenant_id: int | None = None,
    include_inactive: bool = False,
) -> Sequence[Schedule]:
    """Return the schedules ``viewer`` manages.

    Administrators see the schedules they created; the owner sees every
    schedule, optionally filtered by tenant.
    """

    repository = ScheduleRepository(session)
    if viewer.is_owner():
        return repository.list_for_tenant(tenant_id, include_inactive=include_inactive)
    if viewer.is_admin():
        return repository.list_for_tenant(
            viewer.tenant_id,
            created_by=viewer.id,
            include_inactive=include_inactive,
        )
    raise ValueError("Solo administradores pueden consultar los agendamientos")
