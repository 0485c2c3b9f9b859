"""
Logging Configuration
Console logging for the demo. The library modules only create their own
loggers; nothing is configured until a host calls setup_logging.
"""
import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "squircleprogress"
LOG_FORMAT = '%(asctime)s %(levelname)-7s [%(name)s] %(message)s'


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Routes the package's log records to a single console handler.

    Args:
        level: Threshold for the package logger, e.g. logging.DEBUG to follow
            mode/radius changes and sweep restarts.
        stream: Where to write, stdout by default.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling again replaces the console handler instead of adding a second one
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)

    logger.debug(f"Console logging at {logging.getLevelName(level)}.")
    return logger
