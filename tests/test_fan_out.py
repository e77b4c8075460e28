import pytest
from sqlalchemy.exc import IntegrityError

from notifyhub.application.use_cases.notifications import write_fan_out
from notifyhub.domain.entities import NotificationMessage
from notifyhub.domain.exceptions import EmptyAudienceError
from notifyhub.infrastructure.models import DeliveryModel, NotificationModel
from notifyhub.infrastructure.repositories import DeliveryRepository

from conftest import count_rows, fetch_deliveries


def _message(tenant_id: int, created_by: int) -> NotificationMessage:
    return NotificationMessage(
        tenant_id=tenant_id,
        title="Mantenimiento",
        content="El sistema estará en mantenimiento esta noche.",
        priority="important",
        created_by=created_by,
        target_type="users",
        target_ids=[],
    )


def test_fan_out_writes_one_delivery_per_distinct_recipient(session, session_factory, seed):
    tenant = seed.tenant()
    admin = seed.admin(tenant.id)
    first = seed.user(tenant.id, created_by_admin_id=admin.id, name="Uno")
    second = seed.user(tenant.id, created_by_admin_id=admin.id, name="Dos")

    result = write_fan_out(
        session, _message(tenant.id, admin.id), [second.id, first.id, second.id]
    )
    session.commit()

    assert result.recipients == 2
    deliveries = fetch_deliveries(session_factory, notification_id=result.notification.id)
    assert [delivery.user_id for delivery in deliveries] == [first.id, second.id]
    assert all(delivery.tenant_id == tenant.id for delivery in deliveries)
    assert all(delivery.status == "sent" for delivery in deliveries)
    assert all(delivery.is_read is False for delivery in deliveries)


def test_fan_out_does_not_commit(session, session_factory, seed):
    tenant = seed.tenant()
    admin = seed.admin(tenant.id)
    user = seed.user(tenant.id, created_by_admin_id=admin.id)

    write_fan_out(session, _message(tenant.id, admin.id), [user.id])
    session.rollback()

    assert count_rows(session_factory, NotificationModel) == 0
    assert count_rows(session_factory, DeliveryModel) == 0


def test_fan_out_refuses_empty_audience(session, session_factory, seed):
    tenant = seed.tenant()
    admin = seed.admin(tenant.id)

    with pytest.raises(EmptyAudienceError):
        write_fan_out(session, _message(tenant.id, admin.id), [])
    session.rollback()

    assert count_rows(session_factory, NotificationModel) == 0


def test_delivery_pair_is_unique(session, seed):
    tenant = seed.tenant()
    admin = seed.admin(tenant.id)
    user = seed.user(tenant.id, created_by_admin_id=admin.id)
    result = write_fan_out(session, _message(tenant.id, admin.id), [user.id])
    session.commit()

    session.add(
        DeliveryModel(
            tenant_id=tenant.id,
            notification_id=result.notification.id,
            user_id=user.id,
        )
    )
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()


def test_inbox_total_ignores_deliveries_of_other_tenants(session, seed):
    tenant = seed.tenant("Acme")
    admin = seed.admin(tenant.id)
    reader = seed.user(tenant.id, created_by_admin_id=admin.id, name="Lectora")
    other_tenant = seed.tenant("Globex")
    other_admin = seed.admin(other_tenant.id, name="Admin Globex")
    outsider = seed.user(other_tenant.id, created_by_admin_id=other_admin.id, name="Externo")

    write_fan_out(session, _message(tenant.id, admin.id), [reader.id])
    foreign = write_fan_out(session, _message(other_tenant.id, other_admin.id), [outsider.id])
    session.add(
        DeliveryModel(
            tenant_id=tenant.id,
            notification_id=foreign.notification.id,
            user_id=reader.id,
        )
    )
    session.commit()

    repository = DeliveryRepository(session)
    items, total = repository.list_inbox(reader.id)

    assert len(items) == 1
    assert total == 1
    assert items[0].tenant_id == tenant.id
    assert repository.count_unread(reader.id) == 1
