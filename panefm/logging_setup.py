"""Logging bootstrap.

The TUI owns the terminal, so log records go to a rotating file only. The
log path comes from ``PANEFM_LOG_DIR`` when set, else the platform log
directory.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "panefm"
LOG_FILENAME = "panefm.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3


def _parse_level(raw: str | None) -> int:
    normalized = str(raw or "INFO").strip().upper()
    level = getattr(logging, normalized, None)
    return level if isinstance(level, int) else logging.INFO


def default_log_path() -> Path:
    log_dir = os.environ.get("PANEFM_LOG_DIR") or user_log_dir("panefm", appauthor=False)
    return Path(log_dir) / LOG_FILENAME


def configure_logging(level: str | None = None, file_path: Path | None = None) -> Path:
    """Attach a rotating file handler to the ``panefm`` logger.

    Calling it again replaces the previous handler, so repeated setup never
    duplicates records. Returns the log file path.
    """
    path = file_path if file_path is not None else default_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_panefm_handler", False):
            logger.removeHandler(handler)
            handler.close()

    handler = RotatingFileHandler(
        path,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    handler._panefm_handler = True
    logger.addHandler(handler)
    logger.setLevel(_parse_level(level))
    logger.propagate = False
    return path
