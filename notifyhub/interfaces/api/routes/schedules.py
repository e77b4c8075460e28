"""Endpoints for managing scheduled notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from notifyhub.application.use_cases.schedules import (
    cancel_schedule as cancel_schedule_uc,
    create_schedule as create_schedule_uc,
    list_schedules as list_schedules_uc,
    run_dispatch_cycle,
)
from notifyhub.domain.entities import User
from notifyhub.infrastructure.database import get_db
from notifyhub.interfaces.api.dependencies import require_owner, require_sender
from notifyhub.interfaces.api.schemas import (
    DispatchCycleRead,
    ScheduleCreate,
    ScheduleRead,
)
from notifyhub.utils import now_in_app_timezone

router = APIRouter(prefix="/schedules", tags=["schedules"])


@router.post("/", response_model=ScheduleRead, status_code=status.HTTP_201_CREATED)
def create_schedule(
    payload: ScheduleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_sender),
) -> ScheduleRead:
    """Schedule a notification for a future time, optionally recurring."""

    try:
        schedule = create_schedule_uc(
            db,
            creator=current_user,
            title=payload.title,
            content=payload.content,
            priority=payload.priority,
            target_type=payload.target_type,
            target_ids=payload.target_ids,
            scheduled_for=payload.scheduled_for,
            recurrence=payload.recurrence,
            image_url=payload.image_url,
            tenant_id=payload.tenant_id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ScheduleRead.model_validate(schedule)


@router.get("/", response_model=list[ScheduleRead])
def list_schedules(
    tenant_id: int | None = Query(default=None),
    include_inactive: bool = Query(default=False),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_sender),
) -> list[ScheduleRead]:
    schedules = list_schedules_uc(
        db,
        viewer=current_user,
        tenant_id=tenant_id,
        include_inactive=include_inactive,
    )
    return [ScheduleRead.model_validate(schedule) for schedule in schedules]


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
def cancel_schedule(
    schedule_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_sender),
) -> Response:
    """Deactivate a schedule so that it is no longer dispatched."""

    try:
        cancel_schedule_uc(db, schedule_id, actor=current_user)
    except PermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/dispatch", response_model=DispatchCycleRead)
def dispatch_due_schedules(
    current_user: User = Depends(require_owner),
) -> DispatchCycleRead:
    """Run one dispatch cycle immediately instead of waiting for the worker."""

    result = run_dispatch_cycle(now_in_app_timezone())
    return DispatchCycleRead.model_validate(result)
