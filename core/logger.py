"""
Logging setup shared by the API, the CLI and the catalog loaders.

All loggers hang off the "careerpath" root so one call to
configure_logging() controls the whole engine.
"""
import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "careerpath"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_console_handler: Optional[logging.StreamHandler] = None


def configure_logging(level: str = "INFO", stream=None) -> logging.Logger:
    """
    Attach a console handler to the root engine logger.

    Safe to call more than once. Later calls update the level, and move the
    existing handler to `stream` when one is given.
    """
    global _console_handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _console_handler is None:
        _console_handler = logging.StreamHandler(stream or sys.stdout)
        _console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(_console_handler)
    elif stream is not None:
        _console_handler.setStream(stream)

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def reset_logging():
    """Remove handlers installed by configure_logging (useful for testing)."""
    global _console_handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    _console_handler = None
