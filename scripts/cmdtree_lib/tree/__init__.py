"""
cmdtree_lib.tree - The command tree and everything that reads it.

This package contains:
- nodes: SubClass and Action dataclasses
- validation: Name checks and build errors
- builder: Chainable Builder producing a Commander
- commander: Commander cursor, line parsing and structure flattening
- parse: Word resolution and line result types
- display: Help and diagnostic text
- completion: Completion candidates and prefix matching
"""

from .nodes import Action, ActionCallback, SubClass

from .validation import (
    BuildError,
    CommanderBuildError,
    check_names,
)

from .commander import Commander
from .builder import Builder

from .parse import (
    WordKind,
    WordResult,
    LineKind,
    LineResult,
    split_line,
    parse_word,
)

from .display import write_help, write_unrecognized

from .completion import (
    ItemType,
    StructureInfo,
    ActionMatch,
    path_to_words,
    create_tree_completion_items,
    create_action_completion_items,
    word_break_start,
    tree_completions,
)

__all__ = [
    # Nodes
    'Action',
    'ActionCallback',
    'SubClass',
    # Building
    'BuildError',
    'CommanderBuildError',
    'check_names',
    'Builder',
    'Commander',
    # Parsing
    'WordKind',
    'WordResult',
    'LineKind',
    'LineResult',
    'split_line',
    'parse_word',
    'write_help',
    'write_unrecognized',
    # Completion
    'ItemType',
    'StructureInfo',
    'ActionMatch',
    'path_to_words',
    'create_tree_completion_items',
    'create_action_completion_items',
    'word_break_start',
    'tree_completions',
]
