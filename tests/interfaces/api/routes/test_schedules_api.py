"""Integration tests for the schedule endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

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
    admin = seed.admin(tenant.id)
    other_admin = seed.admin(tenant.id, name="Otro Admin")
    first = seed.user(tenant.id, created_by_admin_id=admin.id, name="Ana")
    second = seed.user(tenant.id, created_by_admin_id=admin.id, name="Luis")
    group = seed.group(tenant.id, admin.id, [first.id, second.id])
    owner = seed.owner()
    return {
        "tenant": tenant,
        "admin": admin,
        "other_admin": other_admin,
        "first": first,
        "group": group,
        "owner": owner,
    }


def test_create_list_and_cancel_schedule(client: TestClient, accounts) -> None:
    """Admins manage their own recurring schedules."""

    headers = auth_headers(accounts["admin"].id)
    response = client.post(
        "/schedules/",
        json={
            "title": "Resumen semanal",
            "content": "Revisa los indicadores de la semana",
            "target_type": "groups",
            "target_ids": [accounts["group"].id],
            "scheduled_for": "2030-01-07T09:00:00Z",
            "recurrence": "weekly",
        },
        headers=headers,
    )
    assert response.status_code == 201
    created = response.json()
    assert created["tenant_id"] == accounts["tenant"].id
    assert created["is_active"] is True
    assert created["recurrence"] == "weekly"
    assert created["last_executed_at"] is None

    listing = client.get("/schedules/", headers=headers)
    assert [item["id"] for item in listing.json()] == [created["id"]]
    other = client.get("/schedules/", headers=auth_headers(accounts["other_admin"].id))
    assert other.json() == []

    forbidden = client.delete(
        f"/schedules/{created['id']}", headers=auth_headers(accounts["other_admin"].id)
    )
    assert forbidden.status_code == 403

    cancelled = client.delete(f"/schedules/{created['id']}", headers=headers)
    assert cancelled.status_code == 204
    assert client.get("/schedules/", headers=headers).json() == []
    inactive = client.get(
        "/schedules/", params={"include_inactive": True}, headers=headers
    ).json()
    assert inactive[0]["is_active"] is False

    missing = client.delete("/schedules/9999", headers=headers)
    assert missing.status_code == 404


def test_schedule_with_foreign_group_is_rejected(client: TestClient, accounts, seed) -> None:
    foreign_group = seed.group(accounts["tenant"].id, accounts["other_admin"].id, [])

    response = client.post(
        "/schedules/",
        json={
            "title": "Ajeno",
            "content": "No debería crearse",
            "target_type": "groups",
            "target_ids": [foreign_group.id],
            "scheduled_for": "2030-01-07T09:00:00Z",
        },
        headers=auth_headers(accounts["admin"].id),
    )

    assert response.status_code == 400


def test_unknown_recurrence_fails_validation(client: TestClient, accounts) -> None:
    response = client.post(
        "/schedules/",
        json={
            "title": "Cada hora",
            "content": "No soportado",
            "target_type": "all",
            "scheduled_for": "2030-01-07T09:00:00Z",
            "recurrence": "hourly",
        },
        headers=auth_headers(accounts["admin"].id),
    )

    assert response.status_code == 422


def test_owner_triggers_dispatch_cycle(client: TestClient, accounts, seed) -> None:
    seed.schedule(
        accounts["tenant"].id,
        accounts["admin"].id,
        datetime.now(timezone.utc) - timedelta(minutes=5),
        target_type="groups",
        target_ids=[accounts["group"].id],
        recurrence="daily",
    )

    denied = client.post("/schedules/dispatch", headers=auth_headers(accounts["admin"].id))
    assert denied.status_code == 403

    response = client.post("/schedules/dispatch", headers=auth_headers(accounts["owner"].id))
    assert response.status_code == 200
    assert response.json() == {"processed": 1, "succeeded": 1, "skipped": 0, "failed": []}

    inbox = client.get("/inbox/", headers=auth_headers(accounts["first"].id)).json()
    assert inbox["total"] == 1
    assert inbox["data"][0]["title"] == "Recordatorio"

    again = client.post("/schedules/dispatch", headers=auth_headers(accounts["owner"].id))
    assert again.json()["processed"] == 0
