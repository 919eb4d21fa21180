"""Logging helpers for the engine.

Provides a convenience `get_logger` factory that configures a stream handler
and, when `MACROMENU_LOG_FILE` is set, a rotating file handler for consistent
logging across modules.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from core import config

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler: Optional[RotatingFileHandler] = None


def _get_file_handler() -> Optional[RotatingFileHandler]:
    """Create the shared rotating file handler on first use."""
    global _file_handler
    if config.LOG_FILE is None:
        return None
    if _file_handler is None:
        log_dir = os.path.dirname(os.path.abspath(config.LOG_FILE))
        os.makedirs(log_dir, exist_ok=True)
        _file_handler = RotatingFileHandler(config.LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
        _file_handler.setFormatter(_formatter)
    return _file_handler


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a configured logger with stream and optional rotating file handlers.

    Ensures a consistent logging setup across the engine and avoids adding
    duplicate handlers when called multiple times.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level if level is not None else config.LOG_LEVEL)
        logger.addHandler(_stream_handler)
        file_handler = _get_file_handler()
        if file_handler is not None:
            logger.addHandler(file_handler)
    return logger
