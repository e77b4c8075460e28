"""Errors raised by the notification core."""


class NotificationError(RuntimeError):
    """Base class for notification core failures."""


class AudienceConfigurationError(NotificationError, ValueError):
    """Raised when an explicit target selection resolves to no valid recipient."""


class EmptyAudienceError(NotificationError, ValueError):
    """Raised when a fan-out is requested for zero recipients."""


class ScheduleClaimLostError(NotificationError):
    """Raised when a schedule occurrence was already handled by another runner."""

    def __init__(self, schedule_id: int) -> None:
        super().__init__(f"Schedule {schedule_id} is no longer due for this occurrence")
        self.schedule_id = schedule_id


class ScheduleTimeoutError(NotificationError):
    """Raised when a schedule transaction outlives its time budget."""

    def __init__(self, schedule_id: int, timeout_ms: int) -> None:
        super().__init__(f"Schedule {schedule_id} exceeded its {timeout_ms} ms budget")
        self.schedule_id = schedule_id
        self.timeout_ms = timeout_ms


__all__ = [
    "AudienceConfigurationError",
    "EmptyAudienceError",
    "NotificationError",
    "ScheduleClaimLostError",
    "ScheduleTimeoutError",
]
