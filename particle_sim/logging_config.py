"""Logging setup for the particle simulator."""

import logging
from typing import Optional

from constants import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the `particle_sim` logger.

    Args:
        level: Log level name (DEBUG, INFO, ...); defaults to LOG_LEVEL

    Returns:
        The configured logger. Calling this again only updates the level.
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger("particle_sim")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(getattr(h, "_particle_sim", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._particle_sim = True
        logger.addHandler(console_handler)

    return logger
