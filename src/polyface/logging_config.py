"""
Logging configuration for polyface.

polyface is a library, so its logger carries only a NullHandler until an
application calls setup_logging().

Example usage:
    >>> import polyface
    >>> polyface.setup_logging(level="DEBUG")
    >>> polyface.setup_logging(level="INFO", filename="polyface.log", stream=False)
"""

import logging
import sys
from typing import Any, Literal, Optional

POLYFACE_LOGGER_NAME = "polyface"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    format: Optional[str] = None,
    filename: Optional[str] = None,
    stream: Any = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the "polyface" logger.

    Args:
        level: Log level name. Default is INFO.
        format: Custom log format string. If None, uses DEFAULT_FORMAT.
        filename: If provided, also log to this file.
        stream: Stream to log to. Default is sys.stderr; pass False to
                disable stream output.
        force: If True, remove existing handlers before adding new ones.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(POLYFACE_LOGGER_NAME)
    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    # A lone NullHandler is the library default, drop it once handlers are added
    if len(logger.handlers) == 1 and isinstance(logger.handlers[0], logging.NullHandler):
        force = True
    if force:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

    logger.propagate = False
    formatter = logging.Formatter(format or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    if stream is not False:
        stream_handler = logging.StreamHandler(sys.stderr if stream is None else stream)
        stream_handler.setLevel(log_level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Library mode by default
_root_logger = logging.getLogger(POLYFACE_LOGGER_NAME)
if not _root_logger.handlers:
    _root_logger.addHandler(logging.NullHandler())
