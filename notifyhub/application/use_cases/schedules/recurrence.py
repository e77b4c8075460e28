"""Compute the next state of a schedule after one of its occurrences.

Arithmetic runs on wall-clock fields in the application timezone: a daily
schedule at 09:00 stays at 09:00 across DST changes, and a monthly schedule
keeps its day of month, clamped to the last day of shorter months
(January 31 is followed by February 28, or 29 in leap years). The next trigger
is always derived from the previous trigger time, never from the moment the
occurrence actually ran, so late runs do not shift the cadence.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from notifyhub.domain.entities import (
    RECURRENCE_DAILY,
    RECURRENCE_MONTHLY,
    RECURRENCE_NONE,
    RECURRENCE_WEEKLY,
    ScheduleAdvance,
)
from notifyhub.utils import ensure_app_timezone


def add_months(value: datetime, months: int) -> datetime:
    """Return ``value`` moved by ``months`` calendar months.

    The day is clamped to the last valid day of the target month.
    """

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def next_occurrence(scheduled_for: datetime, recurrence: str) -> datetime | None:
    """Return the trigger time following ``scheduled_for``.

    ``None`` means the schedule does not repeat.
    """

    current = ensure_app_timezone(scheduled_for)
    if recurrence == RECURRENCE_NONE:
        return None
    if recurrence == RECURRENCE_DAILY:
        return current + timedelta(days=1)
    if recurrence == RECURRENCE_WEEKLY:
        return current + timedelta(days=7)
    if recurrence == RECURRENCE_MONTHLY:
        return add_months(current, 1)
    raise ValueError(f"Unknown recurrence '{recurrence}'")


def advance_schedule(
    scheduled_for: datetime, recurrence: str, now: datetime
) -> ScheduleAdvance:
    """Return the mutation to apply after the occurrence at ``scheduled_for``.

    One-off schedules are deactivated; recurring ones move to their next
    occurrence and stay active.
    """

    executed_at = ensure_app_timezone(now)
    following = next_occurrence(scheduled_for, recurrence)
    if following is None:
        return ScheduleAdvance(
            is_active=False,
            scheduled_for=ensure_app_timezone(scheduled_for),
            last_executed_at=executed_at,
        )
    return ScheduleAdvance(
        is_active=True,
        scheduled_for=following,
        last_executed_at=executed_at,
    )


__all__ = ["add_months", "advance_schedule", "next_occurrence"]
