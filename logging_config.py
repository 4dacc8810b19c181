"""
Logging configuration.

GOVERNANCE:
- Answer values are never logged, only ids and flow events
"""

import logging.config
from typing import Any, Optional

from config import get_settings


def build_logging_config(level: str) -> dict[str, Any]:
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "assessment": {"level": level},
            "api": {"level": level},
            "storage": {"level": level},
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging from settings unless a level is given."""
    logging.config.dictConfig(build_logging_config(level or get_settings().log_level))
