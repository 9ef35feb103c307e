"""
Logging configuration.

Thin wrapper over the standard library ``logging`` module so every module
gets its logger the same way.
"""

import logging

from .config import settings

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def init_logging(level: str | int | None = None) -> None:
    """
    Configure root logging for scripts and services using this package.

    Args:
        level: Log level name or number. Defaults to ``settings.log_level``
            (``UNIFEED_LOG_LEVEL``).
    """
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("unifeed").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)
