"""Endpoints for the recipient inbox."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from notifyhub.application.use_cases.inbox import (
    count_unread as count_unread_uc,
    list_inbox as list_inbox_uc,
    mark_as_read as mark_as_read_uc,
    set_feedback as set_feedback_uc,
)
from notifyhub.domain.entities import User
from notifyhub.infrastructure.database import get_db
from notifyhub.interfaces.api.dependencies import require_recipient
from notifyhub.interfaces.api.schemas import (
    FeedbackRequest,
    InboxItemRead,
    InboxPage,
    UnreadCount,
)

router = APIRouter(prefix="/inbox", tags=["inbox"])


@router.get("/", response_model=InboxPage)
def list_inbox(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_recipient),
) -> InboxPage:
    """Return the messages received by the authenticated user."""

    items, total = list_inbox_uc(db, current_user.id, limit=limit, offset=offset)
    return InboxPage(data=[InboxItemRead.model_validate(item) for item in items], total=total)


@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_recipient),
) -> UnreadCount:
    return UnreadCount(count=count_unread_uc(db, current_user.id))


@router.post("/{delivery_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_as_read(
    delivery_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_recipient),
) -> Response:
    try:
        mark_as_read_uc(db, delivery_id, user_id=current_user.id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{delivery_id}/feedback", status_code=status.HTTP_204_NO_CONTENT)
def set_feedback(
    delivery_id: int,
    payload: FeedbackRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_recipient),
) -> Response:
    """Record whether the user liked, disliked or wants a message renewed."""

    try:
        set_feedback_uc(
            db, delivery_id, user_id=current_user.id, feedback=payload.feedback
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
