"""Logging configuration for the application.

Sets up a single stderr handler with a consistent format. Stdout stays free for
CLI output (tables, JSON). Never logs response bodies.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
