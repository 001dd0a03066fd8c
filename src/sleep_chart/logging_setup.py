"""
logging_setup.py

What this file does:
  - configure_logging(): a single stderr handler for the demo script, with
    plotting-library loggers held at WARNING so layout debug lines stay readable.

The sleep_chart modules only ever call logging.getLogger(__name__); handlers are
the calling script's business.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
NOISY_LOGGERS = ("matplotlib", "PIL")


def configure_logging(level: Union[str, int] = "INFO") -> int:
    """Install the handler and return the numeric level in effect."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logging.basicConfig(level=level, handlers=[handler], force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return level
