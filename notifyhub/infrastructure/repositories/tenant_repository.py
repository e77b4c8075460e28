"""Persistence helpers for tenant entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notifyhub.domain.entities import Tenant
from notifyhub.infrastructure.models import TenantModel
from notifyhub.utils import ensure_app_timezone


class TenantRepository:
    """Read access to :class:`Tenant` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, tenant_id: int) -> Tenant | None:
        model = self.session.get(TenantModel, tenant_id)
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: TenantModel) -> Tenant:
        return Tenant(
            id=model.id,
            name=model.name,
            slug=model.slug,
            status=model.status,
            plan=model.plan,
            subscription_expires_at=ensure_app_timezone(model.subscription_expires_at),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["TenantRepository"]
