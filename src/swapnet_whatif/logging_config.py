"""Logging setup for the API server and command-line entry points."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install one stream handler on the ``swapnet_whatif`` logger.

    ``level`` falls back to the ``SWAPNET_LOG_LEVEL`` environment variable,
    then ``INFO``.  Safe to call more than once.
    """
    level = (level or os.getenv("SWAPNET_LOG_LEVEL", "INFO")).upper()
    logger = logging.getLogger("swapnet_whatif")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
