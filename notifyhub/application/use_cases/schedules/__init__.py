"""Use cases for scheduled notifications."""

from .cancel_schedule import cancel_schedule
from .create_schedule import create_schedule
from .dispatch import (
    dispatch_schedule,
    list_due_schedules,
    run_dispatch_cycle,
    run_dispatch_forever,
)
from .list_schedules import list_schedules
from .recurrence import add_months, advance_schedule, next_occurrence

__all__ = [
    "add_months",
    "advance_schedule",
    "cancel_schedule",
    "create_schedule",
    "dispatch_schedule",
    "list_due_schedules",
    "list_schedules",
    "next_occurrence",
    "run_dispatch_cycle",
    "run_dispatch_forever",
]
