"""Logging setup for the algebra toolkit.

Library modules only create ``logging.getLogger(__name__)`` loggers and
never configure handlers. Entry points call ``setup_logging`` once.
"""

import logging
import sys

ROOT_LOGGER_NAME = "algebra_toolkit"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level=logging.INFO, stream=None):
    """Attach a single stream handler to the toolkit's root logger.

    Args:
        level: Numeric level or level name ("DEBUG", "INFO", ...)
        stream: Where records go; defaults to stderr

    Returns:
        The configured ``algebra_toolkit`` logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Calling twice must not duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger
