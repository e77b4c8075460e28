"""Use cases for resolving message audiences."""

from .resolve_audience import (
    resolve_audience,
    resolve_schedule_audience,
    resolve_schedule_scope,
)

__all__ = ["resolve_audience", "resolve_schedule_audience", "resolve_schedule_scope"]
