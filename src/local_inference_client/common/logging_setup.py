"""Stdout logging for the project's own loggers."""
from __future__ import annotations
import logging
import sys

PACKAGE_LOGGER = "local_inference"
HANDLER_NAME = "local_inference.stdout"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Send `local_inference.*` records to stdout.

    Only the handler installed by a previous call is replaced; root
    handlers and anything the embedding application attached are left
    alone.

    Args:
        level: Level for the package logger.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
