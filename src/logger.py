"""Application logging setup.

Logs go to stderr so they never mix with command output on stdout. Set
NOTEPAD_LOG_FILE to also keep a rotating log file.
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config import get_setting

LOGGER_NAME = "notepad"
DEFAULT_LEVEL = "WARNING"


def _resolve_level(name: Optional[str]) -> int:
    level = logging.getLevelName((name or DEFAULT_LEVEL).strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> logging.Logger:
    """Configure the notepad logger once; later calls return it unchanged."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_level(get_setting("NOTEPAD_LOG_LEVEL")))
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file = get_setting("NOTEPAD_LOG_FILE")
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=1_048_576,
            backupCount=5,
            encoding="utf-8",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.info("Logging to %s", handler.baseFilename)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the notepad logger, e.g. get_logger('storage') -> notepad.storage."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
