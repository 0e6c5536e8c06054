"""Logger wiring for the ``geovec`` package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from . import settings

LOGGER_NAME = "geovec"


def configure_logging(runtime_settings: Optional[settings.VectorSettings] = None) -> logging.Logger:
    """Attach a debug file handler to the package logger.

    With ``LOG_TO_FILE`` disabled only the level is applied, the
    package keeps its :class:`logging.NullHandler` and stays silent.
    Calling this again after a file handler is attached is a no-op.
    """
    conf = runtime_settings or settings.current_settings()
    logger = logging.getLogger(LOGGER_NAME)

    level_name = str(conf.DEBUG_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    if not conf.LOG_TO_FILE:
        return logger
    if any(isinstance(handler, logging.FileHandler) for handler in logger.handlers):
        return logger

    log_dir = conf.LOG_DIRECTORY
    if not isinstance(log_dir, Path):
        log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / conf.DEBUG_LOG_FILE

    file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.info("Debug logging initialised at %s", log_path)
    return logger


def reset_logging() -> None:
    """Detach and close any file handlers added by :func:`configure_logging`."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True


__all__ = ["LOGGER_NAME", "configure_logging", "reset_logging"]
