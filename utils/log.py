"""Logging configuration helpers."""

import logging

LOGGER_NAMES = ('services', 'app')


def configure_logging(level='INFO'):
    """Attach a single stream handler to the application loggers."""
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if logger.handlers:
            continue
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
