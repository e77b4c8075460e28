"""Resolve the recipients of a message from its target type and ids."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifyhub.domain.entities import (
    TARGET_ALL,
    TARGET_GROUPS,
    TARGET_USERS,
    Schedule,
)
from notifyhub.domain.exceptions import AudienceConfigurationError
from notifyhub.infrastructure.repositories import GroupRepository, UserRepository

logger = logging.getLogger(__name__)


def resolve_audience(
    session: Session,
    *,
    tenant_id: int,
    target_type: str,
    target_ids: Sequence[int] | None = None,
    admin_id: int | None = None,
) -> list[int]:
    """Return the distinct, sorted ids of the users a message must reach.

    Only active, non-deleted ``user``-role members of ``tenant_id`` are
    eligible; when ``admin_id`` is given they must also have been created by
    that administrator. Explicit selections that cannot be honoured raise
    :class:`AudienceConfigurationError`; an empty list is only returned when the
    audience is legitimately empty.
    """

    users = UserRepository(session)
    requested = list(dict.fromkeys(int(target_id) for target_id in (target_ids or [])))

    if target_type == TARGET_ALL:
        return users.list_recipient_ids(tenant_id, admin_id=admin_id)

    if target_type == TARGET_USERS:
        if not requested:
            raise AudienceConfigurationError("No users were selected")
        resolved = users.list_recipient_ids(
            tenant_id, admin_id=admin_id, user_ids=requested
        )
        missing = sorted(set(requested) - set(resolved))
        if missing:
            raise AudienceConfigurationError(
                f"Selected users are not valid recipients: {missing}"
            )
        return resolved

    if target_type == TARGET_GROUPS:
        if not requested:
            raise AudienceConfigurationError("No groups were selected")
        groups = GroupRepository(session)
        group_ids = groups.list_ids(tenant_id, requested, admin_id=admin_id)
        if not group_ids:
            raise AudienceConfigurationError(
                f"None of the selected groups are valid: {requested}"
            )
        ignored = sorted(set(requested) - set(group_ids))
        if ignored:
            logger.warning(
                "Ignoring groups %s outside tenant %s scope", ignored, tenant_id
            )
        member_ids = groups.list_member_ids(group_ids)
        if not member_ids:
            return []
        return users.list_recipient_ids(
            tenant_id, admin_id=admin_id, user_ids=member_ids
        )

    raise AudienceConfigurationError(f"Unknown target type '{target_type}'")


def resolve_schedule_scope(session: Session, schedule: Schedule) -> int | None:
    """Return the administrator scope that applies to ``schedule``.

    Schedules created by an administrator only reach that administrator's
    users; owner schedules are tenant-wide.
    """

    creator = UserRepository(session).get(schedule.created_by)
    if creator is None or not creator.is_active:
        raise AudienceConfigurationError(
            f"Schedule creator {schedule.created_by} is not an active user"
        )
    if creator.is_owner():
        return None
    if creator.is_admin():
        if creator.tenant_id != schedule.tenant_id:
            raise AudienceConfigurationError(
                f"Administrator {creator.id} does not belong to tenant {schedule.tenant_id}"
            )
        return creator.id
    raise AudienceConfigurationError(
        f"User {creator.id} with role '{creator.role}' cannot send notifications"
    )


def resolve_schedule_audience(session: Session, schedule: Schedule) -> list[int]:
    """Resolve the recipients of one occurrence of ``schedule``."""

    return resolve_audience(
        session,
        tenant_id=schedule.tenant_id,
        target_type=schedule.target_type,
        target_ids=schedule.target_ids,
        admin_id=resolve_schedule_scope(session, schedule),
    )


__all__ = ["resolve_audience", "resolve_schedule_audience", "resolve_schedule_scope"]
