"""
Logger setup for cmdtree internals.

Library modules log through named loggers under "cmdtree". Nothing is
printed unless CMDTREE_DEBUG is set or the application configures logging.
"""

import logging
import os
from typing import Optional

ROOT_LOGGER = "cmdtree"


def is_debug() -> bool:
    """Return True when CMDTREE_DEBUG is set to a non-empty value."""
    return bool(os.environ.get("CMDTREE_DEBUG"))


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Return a logger below the "cmdtree" namespace.

    Args:
        name: Child logger name (e.g. "builder"), or None for the root logger
        level: Explicit level, defaults to DEBUG under CMDTREE_DEBUG

    Returns:
        The logger instance
    """
    logger = logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)
    if level is not None:
        logger.setLevel(level)
    elif is_debug():
        logger.setLevel(logging.DEBUG)
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        if is_debug():
            handler: logging.Handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(r"%(name)20s - %(message)s // %(filename)s:%(lineno)d"))
        else:
            handler = logging.NullHandler()
        root.addHandler(handler)
    return logger
