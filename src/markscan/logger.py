"""Minimal logging utilities for Markscan.

Example:
    >>> from markscan.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scanning snippet")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under ``markscan.``.

    Example:
        >>> get_logger("mymodule").name
        'markscan.mymodule'
    """
    if not (name == "markscan" or name.startswith("markscan.")):
        name = f"markscan.{name}"
    return logging.getLogger(name)
