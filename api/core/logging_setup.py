"""
Process-wide logging configuration.

Modules log through `logging.getLogger(__name__)`; this only wires the root
logger to the console once at bootstrap.
"""

from __future__ import annotations

import logging
import sys

from . import settings

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def configure_logging(level: str | None = None) -> None:
    global _initialized
    if _initialized:
        return None
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(level or settings.log_level())
    root.addHandler(handler)
    _initialized = True
