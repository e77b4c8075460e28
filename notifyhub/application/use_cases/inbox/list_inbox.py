"""Use cases for reading a recipient's inbox."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifyhub.domain.entities import InboxItem
from notifyhub.infrastructure.repositories import DeliveryRepository


def list_inbox(
    session: Session, user_id: int, *, limit: int = 50, offset: int = 0
) -> tuple[Sequence[InboxItem], int]:
    """Return the most recent deliveries of ``user_id`` and the inbox size."""

    return DeliveryRepository(session).list_inbox(user_id, limit=limit, offset=offset)


def count_unread(session: Session, user_id: int) -> int:
    """Return how many deliveries ``user_id`` has not read yet."""

    return DeliveryRepository(session).count_unread(user_id)
