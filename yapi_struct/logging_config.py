"""Logging configuration for yapi_struct.

The package logger carries a NullHandler so that importing the library
stays silent. The CLI calls :func:`configure_logging` to route records
through rich onto stderr, keeping stdout free for generated code.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "yapi_struct"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configure the package logger for console use.

    Args:
        level: Logging level or level name (e.g. ``"DEBUG"``).

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Drop handlers from a previous call
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger.

    Args:
        name: Module name, usually ``__name__``.
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
