from fastapi import FastAPI

from .inbox import router as inbox_router
from .notifications import router as notifications_router
from .schedules import router as schedules_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(notifications_router)
    app.include_router(inbox_router)
    app.include_router(schedules_router)
