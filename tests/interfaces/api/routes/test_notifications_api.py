"""Integration tests for sending notifications and reading the inbox."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from notifyhub.infrastructure.security import create_access_token


def auth_headers(user_id: int) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user_id)})}"}


@pytest.fixture()
def client():
    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def accounts(seed):
    tenant = seed.tenant("Acme")
    other_tenant = seed.tenant("Globex")
    admin = seed.admin(tenant.id)
    other_admin = seed.admin(tenant.id, name="Otro Admin")
    first = seed.user(tenant.id, created_by_admin_id=admin.id, name="Ana")
    second = seed.user(tenant.id, created_by_admin_id=admin.id, name="Luis")
    foreign = seed.user(tenant.id, created_by_admin_id=other_admin.id, name="Eva")
    owner = seed.owner()
    return {
        "tenant": tenant,
        "other_tenant": other_tenant,
        "admin": admin,
        "first": first,
        "second": second,
        "foreign": foreign,
        "owner": owner,
    }


def test_admin_sends_to_own_users_and_recipient_reads_inbox(
    client: TestClient, accounts
) -> None:
    """A sent message lands once in each recipient inbox and can be read."""

    response = client.post(
        "/notifications/send",
        json={
            "title": "Reunión",
            "content": "Reunión general a las 10:00",
            "priority": "important",
            "target_type": "all",
        },
        headers=auth_headers(accounts["admin"].id),
    )
    assert response.status_code == 201
    body = response.json()
    assert body["deliveries"] == 2

    inbox = client.get("/inbox/", headers=auth_headers(accounts["first"].id))
    assert inbox.status_code == 200
    page = inbox.json()
    assert page["total"] == 1
    item = page["data"][0]
    assert item["notification_id"] == body["notification_id"]
    assert item["title"] == "Reunión"
    assert item["is_read"] is False

    foreign_inbox = client.get("/inbox/", headers=auth_headers(accounts["foreign"].id))
    assert foreign_inbox.json()["total"] == 0

    unread = client.get("/inbox/unread-count", headers=auth_headers(accounts["first"].id))
    assert unread.json() == {"count": 1}

    read = client.post(
        f"/inbox/{item['delivery_id']}/read", headers=auth_headers(accounts["first"].id)
    )
    assert read.status_code == 204
    unread = client.get("/inbox/unread-count", headers=auth_headers(accounts["first"].id))
    assert unread.json() == {"count": 0}

    feedback = client.post(
        f"/inbox/{item['delivery_id']}/feedback",
        json={"feedback": "liked"},
        headers=auth_headers(accounts["first"].id),
    )
    assert feedback.status_code == 204
    item = client.get("/inbox/", headers=auth_headers(accounts["first"].id)).json()["data"][0]
    assert item["is_read"] is True
    assert item["feedback"] == "liked"


def test_recipient_cannot_touch_someone_elses_delivery(client: TestClient, accounts) -> None:
    client.post(
        "/notifications/send",
        json={"title": "Hola", "content": "Mensaje", "target_type": "all"},
        headers=auth_headers(accounts["admin"].id),
    )
    delivery_id = client.get(
        "/inbox/", headers=auth_headers(accounts["first"].id)
    ).json()["data"][0]["delivery_id"]

    response = client.post(
        f"/inbox/{delivery_id}/read", headers=auth_headers(accounts["second"].id)
    )
    assert response.status_code == 404


def test_selecting_users_of_another_admin_is_rejected(client: TestClient, accounts) -> None:
    response = client.post(
        "/notifications/send",
        json={
            "title": "Privado",
            "content": "Solo para mi equipo",
            "target_type": "users",
            "target_ids": [accounts["first"].id, accounts["foreign"].id],
        },
        headers=auth_headers(accounts["admin"].id),
    )

    assert response.status_code == 400
    listing = client.get("/notifications/", headers=auth_headers(accounts["admin"].id))
    assert listing.json()["total"] == 0


def test_sending_to_nobody_is_rejected(client: TestClient, seed) -> None:
    tenant = seed.tenant("Vacío")
    admin = seed.admin(tenant.id)

    response = client.post(
        "/notifications/send",
        json={"title": "Hola", "content": "Nadie", "target_type": "all"},
        headers=auth_headers(admin.id),
    )

    assert response.status_code == 400


def test_owner_must_choose_tenant(client: TestClient, accounts) -> None:
    payload = {"title": "Aviso", "content": "Para todos", "target_type": "all"}

    missing = client.post(
        "/notifications/send", json=payload, headers=auth_headers(accounts["owner"].id)
    )
    assert missing.status_code == 400

    sent = client.post(
        "/notifications/send",
        json={**payload, "tenant_id": accounts["tenant"].id},
        headers=auth_headers(accounts["owner"].id),
    )
    assert sent.status_code == 201
    assert sent.json()["deliveries"] == 3


def test_regular_user_cannot_send(client: TestClient, accounts) -> None:
    response = client.post(
        "/notifications/send",
        json={"title": "Hola", "content": "Mensaje", "target_type": "all"},
        headers=auth_headers(accounts["first"].id),
    )

    assert response.status_code == 403


def test_requests_without_valid_token_are_rejected(client: TestClient, accounts) -> None:
    assert client.get("/inbox/").status_code == 401
    invalid = client.get("/inbox/", headers={"Authorization": "Bearer not-a-token"})
    assert invalid.status_code == 401


def test_admin_lists_only_own_tenant_notifications(client: TestClient, accounts, seed) -> None:
    client.post(
        "/notifications/send",
        json={"title": "Acme", "content": "Interno", "target_type": "all"},
        headers=auth_headers(accounts["admin"].id),
    )
    globex_admin = seed.admin(accounts["other_tenant"].id, name="Admin Globex")
    seed.user(accounts["other_tenant"].id, created_by_admin_id=globex_admin.id, name="Gus")
    client.post(
        "/notifications/send",
        json={"title": "Globex", "content": "Interno", "target_type": "all"},
        headers=auth_headers(globex_admin.id),
    )

    listing = client.get("/notifications/", headers=auth_headers(accounts["admin"].id))
    assert [item["title"] for item in listing.json()["data"]] == ["Acme"]

    everything = client.get("/notifications/", headers=auth_headers(accounts["owner"].id))
    assert everything.json()["total"] == 2
