"""Value objects describing the outcome of dispatch cycles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

OUTCOME_SENT = "sent"
OUTCOME_EMPTY = "empty"
OUTCOME_SKIPPED = "skipped"


@dataclass(frozen=True)
class DueSchedule:
    """Identifier and observed trigger time of a schedule selected as due."""

    id: int
    scheduled_for: datetime


@dataclass(frozen=True)
class ScheduleDispatchOutcome:
    """Result of dispatching one schedule occurrence."""

    schedule_id: int
    status: str
    notification_id: int | None = None
    recipients: int = 0


@dataclass(frozen=True)
class DispatchFailure:
    """A schedule whose occurrence was rolled back during a cycle."""

    schedule_id: int
    error: str


@dataclass
class DispatchCycleResult:
    """Aggregated counters returned by a dispatch cycle."""

    processed: int = 0
    succeeded: int = 0
    skipped: int = 0
    failed: list[DispatchFailure] = field(default_factory=list)
    outcomes: list[ScheduleDispatchOutcome] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)


__all__ = [
    "DispatchCycleResult",
    "DispatchFailure",
    "DueSchedule",
    "OUTCOME_EMPTY",
    "OUTCOME_SENT",
    "OUTCOME_SKIPPED",
    "ScheduleDispatchOutcome",
]
