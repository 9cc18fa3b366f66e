"""Central logging configuration.

Applies a root stdout handler so all module loggers emit without per-module
setup.  Keeps uvicorn loggers on the same handler and avoids duplicate
handlers on reloads.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any, Optional

from headb.config import settings


def _dict_config(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application-wide logging once.

    If the root logger already has handlers (pytest, reloaders), leave it
    alone to prevent duplicate output.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    dictConfig(_dict_config(level or settings.log_level))
