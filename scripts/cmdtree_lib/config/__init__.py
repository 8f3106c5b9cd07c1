"""
cmdtree_lib.config - Settings and constants for cmdtree.

This package contains:
- constants: Reserved words, path separators and REPL defaults
- dataclasses: ReplConfig and environment resolution helpers
"""

from .constants import (
    HELP_WORD,
    CANCEL_WORDS,
    EXIT_WORD,
    RESERVED_WORDS,
    CLASS_SEPARATOR,
    ACTION_SEPARATOR,
    ROOT_HELP,
    HISTORY_FILE,
    PROMPT_SUFFIX,
    WORD_BREAK,
)

from .dataclasses import (
    ReplConfig,
    get_history_file,
)

__all__ = [
    # Constants
    'HELP_WORD',
    'CANCEL_WORDS',
    'EXIT_WORD',
    'RESERVED_WORDS',
    'CLASS_SEPARATOR',
    'ACTION_SEPARATOR',
    'ROOT_HELP',
    'HISTORY_FILE',
    'PROMPT_SUFFIX',
    'WORD_BREAK',
    # Settings
    'ReplConfig',
    'get_history_file',
]
