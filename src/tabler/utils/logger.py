"""Minimal logging utilities for Tabler.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from tabler.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering table")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tabler." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tabler.mymodule'
    """
    if not (name == "tabler" or name.startswith("tabler.")):
        name = f"tabler.{name}"
    return logging.getLogger(name)
