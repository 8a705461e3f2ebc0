"""
utils/logger.py
---------------
Centralized logging configuration.
Every module obtains its logger through `get_logger(__name__)`; the root
handler writes to stderr so query errors land where the web server logs them.
With LOG_SQL enabled the `repositories` loggers drop to DEBUG, which logs
each statement with its bound parameters.
"""

import logging
import sys

from config import LOG_LEVEL, LOG_SQL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SQL_LOGGER = "repositories"
_initialized = False


def _init_logging() -> None:
    """Attach the stderr handler to the root logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(handler)
    if LOG_SQL:
        enable_sql_logging()
    _initialized = True


def enable_sql_logging() -> None:
    """Log every repository statement and its parameters at DEBUG."""
    logging.getLogger(SQL_LOGGER).setLevel(logging.DEBUG)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger sharing the root stderr handler.
    """
    _init_logging()
    return logging.getLogger(name)
