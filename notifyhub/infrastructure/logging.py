"""Logging configuration shared by the API and the dispatch worker."""

from __future__ import annotations

import logging.config

from notifyhub.config import get_settings


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger with a console handler.

    ``level`` overrides the ``LOG_LEVEL`` setting when provided.
    """

    settings = get_settings()
    effective_level = (level or settings.log_level or "INFO").upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": effective_level,
                },
                "sqlalchemy.engine": {
                    "level": "WARNING",
                },
                "uvicorn.access": {
                    "handlers": ["console"],
                    "level": "WARNING",
                    "propagate": False,
                },
            },
        }
    )


__all__ = ["setup_logging"]
