"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from notifyhub.domain.entities import ROLE_USER, User
from notifyhub.infrastructure.models import UserModel
from notifyhub.utils import ensure_app_timezone


class UserRepository:
    """Tenant-scoped user lookups used to resolve audiences."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.id == user_id)
            .filter(UserModel.deleted.is_(False))
            .first()
        )
        return self._to_entity(model) if model else None

    def list_recipient_ids(
        self,
        tenant_id: int,
        *,
        admin_id: int | None = None,
        user_ids: Iterable[int] | None = None,
    ) -> list[int]:
        """Return ids of active ``user``-role members of ``tenant_id``.

        ``admin_id`` restricts the result to users created by that administrator
        and ``user_ids`` intersects it with an explicit selection.
        """

        query = (
            self.session.query(UserModel.id)
            .filter(UserModel.tenant_id == tenant_id)
            .filter(UserModel.role == ROLE_USER)
            .filter(UserModel.is_active.is_(True))
            .filter(UserModel.deleted.is_(False))
        )
        if admin_id is not None:
            query = query.filter(UserModel.created_by_admin_id == admin_id)
        if user_ids is not None:
            unique_ids = {int(user_id) for user_id in user_ids}
            if not unique_ids:
                return []
            query = query.filter(UserModel.id.in_(unique_ids))
        return sorted(user_id for (user_id,) in query.all())

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            tenant_id=model.tenant_id,
            created_by_admin_id=model.created_by_admin_id,
            name=model.name,
            email=model.email,
            role=model.role,
            is_active=model.is_active,
            deleted=model.deleted,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
