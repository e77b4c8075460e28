from contextlib import asynccontextmanager

from fastapi import FastAPI

from notifyhub.infrastructure.database import engine, initialize_database
from notifyhub.infrastructure.logging import setup_logging
from notifyhub.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    setup_logging()
    app = FastAPI(title="notifyhub", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
