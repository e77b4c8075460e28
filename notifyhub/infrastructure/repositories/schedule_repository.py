"""Persistence helpers for schedule entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from notifyhub.domain.entities import DueSchedule, Schedule, ScheduleAdvance
from notifyhub.infrastructure.models import ScheduleModel
from notifyhub.utils import ensure_app_naive_datetime, ensure_app_timezone


class ScheduleRepository:
    """Provide persistence operations for :class:`Schedule` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, schedule_id: int) -> Schedule | None:
        model = self.session.get(ScheduleModel, schedule_id)
        return self._to_entity(model) if model else None

    def get_for_update(self, schedule_id: int) -> Schedule | None:
        """Return the schedule locking its row until the transaction ends.

        Backends without row locks (SQLite) ignore ``FOR UPDATE``; the conditional
        update in :meth:`apply_advance` still rejects a second claim.
        """

        model = (
            self.session.query(ScheduleModel)
            .filter(ScheduleModel.id == schedule_id)
            .populate_existing()
            .with_for_update()
            .first()
        )
        return self._to_entity(model) if model else None

    def list_due(self, now: datetime) -> list[DueSchedule]:
        """Return active schedules whose trigger time is not after ``now``."""

        query = (
            self.session.query(ScheduleModel.id, ScheduleModel.scheduled_for)
            .filter(ScheduleModel.is_active.is_(True))
            .filter(ScheduleModel.scheduled_for <= ensure_app_naive_datetime(now))
            .order_by(ScheduleModel.scheduled_for.asc(), ScheduleModel.id.asc())
        )
        return [
            DueSchedule(id=schedule_id, scheduled_for=ensure_app_timezone(scheduled_for))
            for schedule_id, scheduled_for in query.all()
        ]

    def list_for_tenant(
        self,
        tenant_id: int | None,
        *,
        created_by: int | None = None,
        include_inactive: bool = False,
    ) -> Sequence[Schedule]:
        query = self.session.query(ScheduleModel)
        if tenant_id is not None:
            query = query.filter(ScheduleModel.tenant_id == tenant_id)
        if created_by is not None:
            query = query.filter(ScheduleModel.created_by == created_by)
        if not include_inactive:
            query = query.filter(ScheduleModel.is_active.is_(True))
        query = query.order_by(ScheduleModel.scheduled_for.asc(), ScheduleModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def create(self, schedule: Schedule) -> Schedule:
        model = ScheduleModel()
        self._apply_entity_to_model(model, schedule)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def deactivate(self, schedule_id: int) -> bool:
        """Mark the schedule inactive; return ``False`` when it does not exist."""

        updated = (
            self.session.query(ScheduleModel)
            .filter(ScheduleModel.id == schedule_id)
            .update({ScheduleModel.is_active: False}, synchronize_session=False)
        )
        self.session.commit()
        return updated == 1

    def apply_advance(
        self,
        schedule_id: int,
        *,
        expected_scheduled_for: datetime,
        advance: ScheduleAdvance,
    ) -> bool:
        """Apply ``advance`` only if the schedule still holds the claimed occurrence.

        The update is conditioned on the schedule being active with the trigger
        time observed when it was claimed, so at most one runner can consume a
        given occurrence. Does not commit.
        """

        updated = (
            self.session.query(ScheduleModel)
            .filter(ScheduleModel.id == schedule_id)
            .filter(ScheduleModel.is_active.is_(True))
            .filter(
                ScheduleModel.scheduled_for
                == ensure_app_naive_datetime(expected_scheduled_for)
            )
            .update(
                {
                    ScheduleModel.is_active: advance.is_active,
                    ScheduleModel.scheduled_for: ensure_app_naive_datetime(
                        advance.scheduled_for
                    ),
                    ScheduleModel.last_executed_at: ensure_app_naive_datetime(
                        advance.last_executed_at
                    ),
                },
                synchronize_session=False,
            )
        )
        return updated == 1

    @staticmethod
    def _apply_entity_to_model(model: ScheduleModel, schedule: Schedule) -> None:
        model.tenant_id = schedule.tenant_id
        model.title = schedule.title
        model.content = schedule.content
        model.priority = schedule.priority
        model.created_by = schedule.created_by
        model.target_type = schedule.target_type
        model.target_ids = list(schedule.target_ids or [])
        model.image_url = schedule.image_url
        model.scheduled_for = ensure_app_naive_datetime(schedule.scheduled_for)
        model.recurrence = schedule.recurrence
        model.is_active = schedule.is_active
        model.last_executed_at = ensure_app_naive_datetime(schedule.last_executed_at)
        if schedule.created_at is not None:
            model.created_at = ensure_app_naive_datetime(schedule.created_at)

    @staticmethod
    def _to_entity(model: ScheduleModel) -> Schedule:
        return Schedule(
            id=model.id,
            tenant_id=model.tenant_id,
            title=model.title,
            content=model.content,
            priority=model.priority,
            created_by=model.created_by,
            target_type=model.target_type,
            target_ids=[int(target_id) for target_id in (model.target_ids or [])],
            image_url=model.image_url,
            scheduled_for=ensure_app_timezone(model.scheduled_for),
            recurrence=model.recurrence,
            is_active=model.is_active,
            last_executed_at=ensure_app_timezone(model.last_executed_at),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ScheduleRepository"]
