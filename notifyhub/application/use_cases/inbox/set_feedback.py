"""Use case for recording a recipient's reaction to a notification."""

from sqlalchemy.orm import Session

from notifyhub.domain.entities import FEEDBACK_VALUES
from notifyhub.infrastructure.repositories import DeliveryRepository
from notifyhub.utils import now_in_app_timezone


def set_feedback(
    session: Session, delivery_id: int, *, user_id: int, feedback: str
) -> None:
    """Store ``feedback`` (liked, renew or disliked) on the user's delivery."""

    if feedback not in FEEDBACK_VALUES:
        raise ValueError("Valor de retroalimentación no permitido")

    repository = DeliveryRepository(session)
    if not repository.set_feedback(
        delivery_id,
        user_id=user_id,
        feedback=feedback,
        feedback_at=now_in_app_timezone(),
    ):
        raise ValueError("Entrega no encontrada")
