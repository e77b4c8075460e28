from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from notifyhub.application.use_cases.schedules import (
    add_months,
    advance_schedule,
    next_occurrence,
)
from notifyhub.config import reset_settings_cache
from notifyhub.utils import get_app_timezone

UTC = timezone.utc


def test_daily_moves_one_day_from_previous_trigger():
    scheduled_for = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)
    now = datetime(2024, 1, 1, 9, 5, tzinfo=UTC)

    advance = advance_schedule(scheduled_for, "daily", now)

    assert advance.is_active is True
    assert advance.scheduled_for == datetime(2024, 1, 2, 9, 0, tzinfo=UTC)
    assert advance.last_executed_at == now


def test_weekly_ignores_how_late_the_run_was():
    scheduled_for = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)
    late_run = datetime(2024, 1, 3, 17, 42, tzinfo=UTC)

    advance = advance_schedule(scheduled_for, "weekly", late_run)

    assert advance.scheduled_for == datetime(2024, 1, 8, 9, 0, tzinfo=UTC)
    assert advance.last_executed_at == late_run


@pytest.mark.parametrize(
    ("scheduled_for", "expected"),
    [
        (datetime(2024, 1, 31, 8, 0), datetime(2024, 2, 29, 8, 0)),
        (datetime(2023, 1, 31, 8, 0), datetime(2023, 2, 28, 8, 0)),
        (datetime(2024, 3, 31, 8, 0), datetime(2024, 4, 30, 8, 0)),
        (datetime(2024, 12, 15, 8, 0), datetime(2025, 1, 15, 8, 0)),
    ],
)
def test_monthly_clamps_to_last_day_of_month(scheduled_for, expected):
    following = next_occurrence(scheduled_for.replace(tzinfo=UTC), "monthly")

    assert following == expected.replace(tzinfo=UTC)


def test_monthly_clamp_does_not_accumulate():
    assert add_months(datetime(2024, 1, 31), 2) == datetime(2024, 3, 31)
    assert add_months(datetime(2024, 1, 31), 12) == datetime(2025, 1, 31)


def test_one_off_schedule_is_deactivated_and_keeps_its_trigger():
    scheduled_for = datetime(2024, 5, 10, 12, 0, tzinfo=UTC)
    now = datetime(2024, 5, 10, 12, 1, tzinfo=UTC)

    advance = advance_schedule(scheduled_for, "none", now)

    assert advance.is_active is False
    assert advance.scheduled_for == scheduled_for
    assert advance.last_executed_at == now


@pytest.mark.parametrize("recurrence", ["daily", "weekly", "monthly"])
def test_recurring_advance_is_strictly_forward(recurrence):
    scheduled_for = datetime(2024, 2, 29, 23, 59, tzinfo=UTC)

    advance = advance_schedule(scheduled_for, recurrence, scheduled_for)

    assert advance.scheduled_for > scheduled_for


def test_unknown_recurrence_is_rejected():
    with pytest.raises(ValueError):
        next_occurrence(datetime(2024, 1, 1, tzinfo=UTC), "hourly")


def test_naive_trigger_is_read_as_application_time():
    following = next_occurrence(datetime(2024, 1, 1, 9, 0), "daily")

    assert following.tzinfo is not None
    assert following.utcoffset() == timedelta(0)
    assert following.replace(tzinfo=None) == datetime(2024, 1, 2, 9, 0)


def test_daily_keeps_wall_clock_time_across_dst(monkeypatch):
    try:
        ZoneInfo("America/New_York")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")
    monkeypatch.setenv("APP_TIMEZONE", "America/New_York")
    reset_settings_cache()
    get_app_timezone.cache_clear()
    tz = get_app_timezone()

    scheduled_for = datetime(2024, 3, 9, 9, 0, tzinfo=tz)
    following = next_occurrence(scheduled_for, "daily")

    assert following.hour == 9
    assert scheduled_for.utcoffset() == timedelta(hours=-5)
    assert following.utcoffset() == timedelta(hours=-4)
