"""Logging setup for the lintfiles command line."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "lintfiles"


def configure_logging(level: int = logging.WARNING, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single handler writing to `stream` (default stderr) to the `lintfiles` logger at `level`."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
