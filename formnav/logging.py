"""Structured navigation event logging."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog

from .config import settings

DEFAULT_LOG_FILE = "logs/navigation-events.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
BACKUP_LOG_FILES = 5
_LOGGER_NAME = "formnav"


def _resolve_log_path() -> Path:
    configured_path = settings.logging.file_path
    if configured_path:
        return Path(configured_path).expanduser()
    project_root = Path(__file__).resolve().parents[1]
    return project_root / DEFAULT_LOG_FILE


def _configure_rotating_handler() -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    log_path = _resolve_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_LOG_FILES,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.logging.level, logging.INFO))
    logger.propagate = False
    return logger


def configure_logging() -> None:
    """Install the rotating JSON event log. Safe to call more than once."""
    _configure_rotating_handler()
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

