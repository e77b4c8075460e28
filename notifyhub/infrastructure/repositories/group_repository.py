"""Persistence layer for groups and memberships."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from notifyhub.infrastructure.models import GroupModel, UserGroupModel


class GroupRepository:
    """Tenant-scoped group lookups used to expand group targets."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_ids(
        self,
        tenant_id: int,
        group_ids: Iterable[int],
        *,
        admin_id: int | None = None,
    ) -> list[int]:
        """Return the subset of ``group_ids`` that belongs to ``tenant_id``."""

        unique_ids = {int(group_id) for group_id in group_ids}
        if not unique_ids:
            return []
        query = (
            self.session.query(GroupModel.id)
            .filter(GroupModel.tenant_id == tenant_id)
            .filter(GroupModel.id.in_(unique_ids))
        )
        if admin_id is not None:
            query = query.filter(GroupModel.created_by_admin_id == admin_id)
        return sorted(group_id for (group_id,) in query.all())

    def list_member_ids(self, group_ids: Iterable[int]) -> list[int]:
        """Return the distinct user ids belonging to any of ``group_ids``."""

        unique_ids = {int(group_id) for group_id in group_ids}
        if not unique_ids:
            return []
        query = (
            self.session.query(UserGroupModel.user_id)
            .filter(UserGroupModel.group_id.in_(unique_ids))
            .distinct()
        )
        return sorted(user_id for (user_id,) in query.all())


__all__ = ["GroupRepository"]
