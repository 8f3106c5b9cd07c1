"""
cmdtree_lib.common - Shared utilities for cmdtree

This module provides:
- colors: ANSI color codes and console message functions
- logging_setup: Named loggers for library internals
"""

from .colors import Colors, paint, should_colorize, info
from .logging_setup import get_logger, is_debug

__all__ = [
    'Colors', 'paint', 'should_colorize', 'info',
    'get_logger', 'is_debug',
]
