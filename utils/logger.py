"""
utils/logger.py
---------------
Logging setup for the Jobly data layer.

Repositories log every create/update/delete at INFO; `db.connection` logs
each statement at DEBUG and failed statements at ERROR. Set LOG_LEVEL=DEBUG
to see the SQL after `$N` placeholders have been rewritten for psycopg2.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_configured = False


def _configure_root() -> None:
    """Send records to stdout at LOG_LEVEL; runs once per process."""
    global _configured
    if _configured:
        return
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    # A host application (or pytest) may have configured logging already.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, e.g. ``get_logger(__name__)``."""
    _configure_root()
    return logging.getLogger(name)
