"""Logging initialisation for the command line."""

from __future__ import annotations

import logging
import sys

_LEVELS = (logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG)


def setup_logging(verbosity: int = 0, logname: str = "inireader") -> None:
    """Send ``inireader`` log records to stderr at a level picked by ``verbosity``."""

    level = _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]
    logger = logging.getLogger(logname)
    logger.setLevel(level)

    # replace, never flush, a handler bound to an earlier sys.stderr
    for handler in list(logger.handlers):
        if getattr(handler, "_inireader", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    handler._inireader = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


__all__ = ["setup_logging"]
