"""Use case for marking a delivery as read."""

from sqlalchemy.orm import Session

from notifyhub.infrastructure.repositories import DeliveryRepository
from notifyhub.utils import now_in_app_timezone


def mark_as_read(session: Session, delivery_id: int, *, user_id: int) -> None:
    """Flag the delivery as read by its recipient."""

    repository = DeliveryRepository(session)
    if not repository.mark_as_read(
        delivery_id, user_id=user_id, read_at=now_in_app_timezone()
    ):
        raise ValueError("Entrega no encontrada")
