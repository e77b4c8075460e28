"""Turn due schedules into notifications exactly once per occurrence.

Each due schedule is handled in its own transaction: the schedule row is
claimed, its audience resolved, the notification and deliveries written and the
schedule advanced (or retired) with a conditional update on the trigger time
that was claimed. Everything commits together or not at all, and a runner that
loses the claim to a concurrent one rolls back without sending anything.

Every schedule transaction has a time budget. It is checked between the claim,
resolve, write and advance steps; on PostgreSQL the server also enforces it on
each statement and on idle time inside the transaction.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.orm import Session

from notifyhub.application.use_cases.audience import resolve_schedule_audience
from notifyhub.application.use_cases.notifications import write_fan_out
from notifyhub.config import get_settings
from notifyhub.domain.entities import (
    OUTCOME_EMPTY,
    OUTCOME_SENT,
    OUTCOME_SKIPPED,
    DispatchCycleResult,
    DispatchFailure,
    DueSchedule,
    ScheduleDispatchOutcome,
)
from notifyhub.domain.exceptions import (
    AudienceConfigurationError,
    ScheduleClaimLostError,
    ScheduleTimeoutError,
)
from notifyhub.infrastructure.database import SessionLocal
from notifyhub.infrastructure.repositories import ScheduleRepository
from notifyhub.utils import ensure_app_timezone, now_in_app_timezone

from .recurrence import advance_schedule

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


def _apply_server_timeouts(session: Session, timeout_ms: int | None) -> None:
    if not timeout_ms:
        return
    if session.get_bind().dialect.name == "postgresql":
        limit_ms = int(timeout_ms)
        session.execute(text(f"SET LOCAL statement_timeout = {limit_ms}"))
        session.execute(text(f"SET LOCAL idle_in_transaction_session_timeout = {limit_ms}"))


class _Budget:
    """Monotonic deadline for one schedule transaction."""

    def __init__(self, schedule_id: int, timeout_ms: int | None) -> None:
        self.schedule_id = schedule_id
        self.timeout_ms = timeout_ms
        self.deadline = time.monotonic() + timeout_ms / 1000 if timeout_ms else None

    def check(self) -> None:
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise ScheduleTimeoutError(self.schedule_id, self.timeout_ms)


def dispatch_schedule(
    session_factory: SessionFactory,
    due: DueSchedule,
    now: datetime,
    *,
    timeout_ms: int | None = None,
) -> ScheduleDispatchOutcome:
    """Dispatch the occurrence of ``due`` observed when it was selected.

    Raises whatever prevented the occurrence from being committed, including
    :class:`ScheduleTimeoutError` when ``timeout_ms`` elapses; the transaction
    is rolled back first so the schedule stays due.
    """

    now = ensure_app_timezone(now)
    budget = _Budget(due.id, timeout_ms)
    with session_factory() as session:
        try:
            _apply_server_timeouts(session, timeout_ms)
            schedules = ScheduleRepository(session)
            schedule = schedules.get_for_update(due.id)
            if (
                schedule is None
                or not schedule.is_due(now)
                or schedule.scheduled_for != due.scheduled_for
            ):
                raise ScheduleClaimLostError(due.id)

            recipients = resolve_schedule_audience(session, schedule)
            budget.check()
            notification_id = None
            delivered = 0
            if recipients:
                fan_out = write_fan_out(
                    session, schedule.to_message(), recipients, created_at=now
                )
                notification_id = fan_out.notification.id
                delivered = fan_out.recipients
                budget.check()

            advance = advance_schedule(schedule.scheduled_for, schedule.recurrence, now)
            if not schedules.apply_advance(
                schedule.id,
                expected_scheduled_for=schedule.scheduled_for,
                advance=advance,
            ):
                raise ScheduleClaimLostError(schedule.id)
            budget.check()
            session.commit()
        except ScheduleClaimLostError:
            session.rollback()
            logger.info("Schedule %s was already dispatched by another runner", due.id)
            return ScheduleDispatchOutcome(schedule_id=due.id, status=OUTCOME_SKIPPED)
        except Exception:
            session.rollback()
            raise

    if notification_id is None:
        logger.info(
            "Schedule %s has no recipients; occurrence at %s consumed without a notification",
            due.id,
            due.scheduled_for.isoformat(),
        )
        status = OUTCOME_EMPTY
    else:
        logger.info(
            "Schedule %s dispatched notification %s to %s recipients",
            due.id,
            notification_id,
            delivered,
        )
        status = OUTCOME_SENT

    if advance.is_active:
        logger.debug("Schedule %s next runs at %s", due.id, advance.scheduled_for.isoformat())
    else:
        logger.debug("Schedule %s deactivated", due.id)

    return ScheduleDispatchOutcome(
        schedule_id=due.id,
        status=status,
        notification_id=notification_id,
        recipients=delivered,
    )


def _dispatch_isolated(
    session_factory: SessionFactory,
    due: DueSchedule,
    now: datetime,
    timeout_ms: int | None,
) -> ScheduleDispatchOutcome | DispatchFailure:
    try:
        return dispatch_schedule(session_factory, due, now, timeout_ms=timeout_ms)
    except AudienceConfigurationError as exc:
        logger.warning("Schedule %s has an invalid audience: %s", due.id, exc)
        return DispatchFailure(schedule_id=due.id, error=str(exc))
    except ScheduleTimeoutError as exc:
        logger.warning("Schedule %s rolled back: %s", due.id, exc)
        return DispatchFailure(schedule_id=due.id, error=str(exc))
    except Exception as exc:
        logger.exception("Error dispatching schedule %s", due.id)
        return DispatchFailure(schedule_id=due.id, error=f"{type(exc).__name__}: {exc}")


def _record(
    result: DispatchCycleResult, outcome: ScheduleDispatchOutcome | DispatchFailure
) -> None:
    if isinstance(outcome, DispatchFailure):
        result.failed.append(outcome)
        return
    result.outcomes.append(outcome)
    if outcome.status == OUTCOME_SKIPPED:
        result.skipped += 1
    else:
        result.succeeded += 1


def list_due_schedules(
    now: datetime, *, session_factory: SessionFactory | None = None
) -> list[DueSchedule]:
    """Return the schedules due at ``now`` with the trigger time observed."""

    factory = session_factory or SessionLocal
    with factory() as session:
        return ScheduleRepository(session).list_due(ensure_app_timezone(now))


def run_dispatch_cycle(
    now: datetime,
    *,
    session_factory: SessionFactory | None = None,
    max_workers: int | None = None,
    timeout_ms: int | None = None,
) -> DispatchCycleResult:
    """Dispatch every schedule due at ``now``.

    A failing schedule is rolled back, logged and reported in
    ``DispatchCycleResult.failed`` without affecting the others. Errors raised
    while selecting due schedules propagate to the caller.
    """

    settings = get_settings()
    factory = session_factory or SessionLocal
    workers = max_workers if max_workers is not None else settings.dispatch_max_workers
    if timeout_ms is None:
        timeout_ms = settings.dispatch_timeout_ms
    now = ensure_app_timezone(now)

    due_schedules = list_due_schedules(now, session_factory=factory)
    result = DispatchCycleResult(processed=len(due_schedules))
    if not due_schedules:
        logger.debug("No schedules due at %s", now.isoformat())
        return result

    logger.info("Processing %s due schedules", len(due_schedules))

    if workers > 1 and len(due_schedules) > 1:
        with ThreadPoolExecutor(
            max_workers=min(workers, len(due_schedules)),
            thread_name_prefix="dispatch",
        ) as executor:
            futures = [
                executor.submit(_dispatch_isolated, factory, due, now, timeout_ms)
                for due in due_schedules
            ]
            for future in as_completed(futures):
                _record(result, future.result())
    else:
        for due in due_schedules:
            _record(result, _dispatch_isolated(factory, due, now, timeout_ms))

    log = logger.warning if result.failed else logger.info
    log(
        "Dispatch cycle finished: processed=%s succeeded=%s skipped=%s failed=%s",
        result.processed,
        result.succeeded,
        result.skipped,
        len(result.failed),
    )
    return result


def run_dispatch_forever(
    *,
    interval_seconds: float | None = None,
    session_factory: SessionFactory | None = None,
    max_workers: int | None = None,
    clock: Callable[[], datetime] = now_in_app_timezone,
    sleep: Callable[[float], None] = time.sleep,
    max_cycles: int | None = None,
) -> None:
    """Run dispatch cycles on a fixed interval until interrupted.

    A cycle that cannot run at all (for example while the database is down) is
    logged and retried on the next tick.
    """

    interval = (
        interval_seconds
        if interval_seconds is not None
        else get_settings().dispatch_interval_seconds
    )
    logger.info("Starting schedule dispatcher (interval %ss)", interval)
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        started = time.monotonic()
        try:
            run_dispatch_cycle(
                clock(), session_factory=session_factory, max_workers=max_workers
            )
        except Exception:
            logger.exception("Dispatch cycle failed")
        cycles += 1
        if max_cycles is not None and cycles >= max_cycles:
            break
        sleep(max(0.0, interval - (time.monotonic() - started)))


__all__ = [
    "dispatch_schedule",
    "list_due_schedules",
    "run_dispatch_cycle",
    "run_dispatch_forever",
]
