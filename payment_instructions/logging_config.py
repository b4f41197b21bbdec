"""Logging setup for the service."""

from __future__ import annotations

import logging
import sys

from payment_instructions.config import Settings

_LOGGER_NAME = "payment_instructions"
_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Safe to call more than once; later calls only adjust the level.
    """

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)

    return logger
