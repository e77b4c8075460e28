"""Endpoints for sending notifications and reviewing sent ones."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from notifyhub.application.use_cases.notifications import (
    list_notifications as list_notifications_uc,
    send_notification as send_notification_uc,
)
from notifyhub.domain.entities import User
from notifyhub.infrastructure.database import get_db
from notifyhub.interfaces.api.dependencies import require_sender
from notifyhub.interfaces.api.schemas import (
    NotificationPage,
    NotificationRead,
    NotificationSendRequest,
    NotificationSendResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post(
    "/send",
    response_model=NotificationSendResponse,
    status_code=status.HTTP_201_CREATED,
)
def send_notification(
    payload: NotificationSendRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_sender),
) -> NotificationSendResponse:
    """Deliver a notification right away to the selected audience."""

    try:
        result = send_notification_uc(
            db,
            sender=current_user,
            title=payload.title,
            content=payload.content,
            priority=payload.priority,
            target_type=payload.target_type,
            target_ids=payload.target_ids,
            image_url=payload.image_url,
            tenant_id=payload.tenant_id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return NotificationSendResponse(
        notification_id=result.notification.id,
        deliveries=result.recipients,
    )


@router.get("/", response_model=NotificationPage)
def list_notifications(
    tenant_id: int | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_sender),
) -> NotificationPage:
    """Return the notifications sent within the caller's reach."""

    try:
        notifications, total = list_notifications_uc(
            db, viewer=current_user, tenant_id=tenant_id, limit=limit, offset=offset
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc

    return NotificationPage(
        data=[NotificationRead.model_validate(item) for item in notifications],
        total=total,
    )
