"""Logging setup for Ticket Desk."""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any

from ticket_desk.core.config import Settings

PACKAGE_LOGGER = "ticket_desk"


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure the ``ticket_desk`` logger tree based on settings.

    Only the package logger is touched, so a host application's root
    configuration stays as it was.
    """

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
        }
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "level": level,
            "filename": settings.log_file,
            "encoding": "utf-8",
        }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": settings.log_format,
                }
            },
            "handlers": handlers,
            "loggers": {
                PACKAGE_LOGGER: {
                    "handlers": list(handlers),
                    "level": level,
                    "propagate": False,
                }
            },
        }
    )

    return logging.getLogger(PACKAGE_LOGGER)
