"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tomato_cli"
_LOG_FILE = "tomato.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2
_LEVEL_ENV = "TOMATO_LOG_LEVEL"

_logger: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    The level defaults to INFO and can be raised or lowered with the
    ``TOMATO_LOG_LEVEL`` environment variable.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    level = os.environ.get(_LEVEL_ENV, "INFO").upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
