"""Application logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "worktimer"
_LOG_FILE = "worktimer.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 3

_HANDLER_NAME = f"{_APP_NAME}:file"


def get_logger(level: int = logging.INFO, log_dir: Path | None = None) -> logging.Logger:
    """Return the package logger, attaching the rotating file handler once.

    The terminal belongs to the timer screen, so records only go to the file.
    """
    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return logger

    log_dir = log_dir if log_dir is not None else Path(user_log_dir(_APP_NAME))
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
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    return logger
