"""Configuracion centralizada de logging."""

from __future__ import annotations

import logging
import sys

from pasos_tool.config import LOG_FORMAT, LOG_LEVEL


def setup_logger(name: str = "pasos_tool", level: str = LOG_LEVEL) -> logging.Logger:
    """Set up a logger with a console handler.

    Args:
        name: Logger name; the package logger configures every module.
        level: Level name such as ``"INFO"`` or ``"DEBUG"``.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger
