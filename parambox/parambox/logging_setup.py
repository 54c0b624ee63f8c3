"""
Log routing for the parambox CLI.

Library modules only call `logging.getLogger(__name__)` and never touch
handlers. The CLI hands its `--log-level` choice to configure_cli_logging,
which attaches one stderr handler to the `parambox` package logger.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "parambox"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_cli_handler: logging.Handler | None = None


def configure_cli_logging(level: str = "WARNING", stream: TextIO | None = None) -> logging.Logger:
    """Send parambox records at `level` and above to `stream` (stderr by default).

    Repeated calls replace the handler from the previous call, so running
    several commands in one process never duplicates output.
    """
    global _cli_handler

    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r} (known: {', '.join(LOG_LEVELS)})")

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _cli_handler is not None:
        logger.removeHandler(_cli_handler)

    _cli_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _cli_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_cli_handler)
    logger.setLevel(name)
    return logger


__all__ = ["LOG_LEVELS", "configure_cli_logging"]
