"""Shared fixtures: an isolated database and helpers to seed it."""

from __future__ import annotations

import itertools
import os
from collections.abc import Iterator, Sequence
from datetime import datetime

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["DISPATCH_MAX_WORKERS"] = "1"

import pytest
from sqlalchemy.orm import Session

from notifyhub.config import reset_settings_cache
from notifyhub.infrastructure import database
from notifyhub.infrastructure.models import (
    DeliveryModel,
    GroupModel,
    NotificationModel,
    ScheduleModel,
    TenantModel,
    UserGroupModel,
    UserModel,
)
from notifyhub.utils import ensure_app_naive_datetime, get_app_timezone


class Seeder:
    """Insert rows directly through the ORM, committing each one."""

    _slugs = itertools.count(1)

    def __init__(self, session_factory) -> None:
        self.session_factory = session_factory

    def _save(self, model):
        with self.session_factory() as session:
            session.add(model)
            session.commit()
            session.refresh(model)
            session.expunge(model)
        return model

    def tenant(self, name: str = "Acme") -> TenantModel:
        slug = f"{name.lower().replace(' ', '-')}-{next(self._slugs)}"
        return self._save(TenantModel(name=name, slug=slug, status="active", plan="basic"))

    def user(
        self,
        tenant_id: int | None,
        *,
        role: str = "user",
        created_by_admin_id: int | None = None,
        name: str = "Usuario",
        is_active: bool = True,
        deleted: bool = False,
    ) -> UserModel:
        return self._save(
            UserModel(
                tenant_id=tenant_id,
                created_by_admin_id=created_by_admin_id,
                name=name,
                email=f"{name.lower().replace(' ', '.')}@example.com",
                role=role,
                is_active=is_active,
                deleted=deleted,
            )
        )

    def admin(self, tenant_id: int, *, name: str = "Admin") -> UserModel:
        return self.user(tenant_id, role="admin", name=name)

    def owner(self) -> UserModel:
        return self.user(None, role="owner", name="Owner")

    def group(
        self, tenant_id: int, admin_id: int, member_ids: Sequence[int], *, name: str = "Grupo"
    ) -> GroupModel:
        group = self._save(
            GroupModel(tenant_id=tenant_id, created_by_admin_id=admin_id, name=name)
        )
        with self.session_factory() as session:
            for user_id in member_ids:
                session.add(UserGroupModel(user_id=user_id, group_id=group.id))
            session.commit()
        return group

    def schedule(
        self,
        tenant_id: int,
        created_by: int,
        scheduled_for: datetime,
        *,
        target_type: str = "all",
        target_ids: Sequence[int] = (),
        recurrence: str = "none",
        is_active: bool = True,
        title: str = "Recordatorio",
    ) -> ScheduleModel:
        return self._save(
            ScheduleModel(
                tenant_id=tenant_id,
                title=title,
                content="Contenido del mensaje",
                priority="normal",
                created_by=created_by,
                target_type=target_type,
                target_ids=list(target_ids),
                scheduled_for=ensure_app_naive_datetime(scheduled_for),
                recurrence=recurrence,
                is_active=is_active,
            )
        )


def count_rows(session_factory, model, **filters) -> int:
    with session_factory() as session:
        return session.query(model).filter_by(**filters).count()


def fetch_schedule(session_factory, schedule_id: int) -> ScheduleModel:
    with session_factory() as session:
        model = session.get(ScheduleModel, schedule_id)
        session.expunge(model)
        return model


def fetch_deliveries(session_factory, **filters) -> list[DeliveryModel]:
    with session_factory() as session:
        models = (
            session.query(DeliveryModel)
            .filter_by(**filters)
            .order_by(DeliveryModel.user_id)
            .all()
        )
        for model in models:
            session.expunge(model)
        return models


def fetch_notifications(session_factory, **filters) -> list[NotificationModel]:
    with session_factory() as session:
        models = session.query(NotificationModel).filter_by(**filters).all()
        for model in models:
            session.expunge(model)
        return models


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Give every test empty tables on the shared in-memory database."""

    reset_settings_cache()
    get_app_timezone.cache_clear()
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    yield
    reset_settings_cache()
    get_app_timezone.cache_clear()


@pytest.fixture()
def session_factory():
    return database.SessionLocal


@pytest.fixture()
def session(session_factory) -> Iterator[Session]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)


@pytest.fixture()
def file_session_factory(tmp_path):
    """Session factory on a file database so that connections are independent."""

    engine = database.build_engine(f"sqlite+pysqlite:///{tmp_path / 'notifyhub.db'}")
    database.initialize_database(engine)
    try:
        yield database.build_session_factory(engine)
    finally:
        engine.dispose()
