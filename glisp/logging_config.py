"""Logging setup for the glisp package.

Every module logs through ``logging.getLogger(__name__)``; this module only
attaches a handler to the package logger. Repeated calls do not duplicate
handlers.

Library code never calls ``setup_logging``; the application embedding glisp
(an editor or a command-line front end) calls ``glisp.setup_logging()`` once at
startup. Without it, records propagate to whatever the host configured.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from glisp.config import get_log_level

LOGGER_NAME = "glisp"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False


def setup_logging(level: Optional[int] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the ``glisp`` logger. Level defaults to ``GLISP_LOG_LEVEL``."""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if level is not None else get_log_level())

    if not _configured:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _configured = True
    return logger
