"""
cmdtree_lib - Hierarchical command trees for line-driven consoles

Build a tree of classes (sub-menus) and actions (commands) with Builder,
then feed user input to Commander.parse_line. cmdtree_lib.repl runs the
tree interactively with prompt_toolkit.
"""

from .tree import (
    Builder,
    BuildError,
    CommanderBuildError,
    Commander,
    LineKind,
    LineResult,
)

__version__ = "1.0.0"

__all__ = [
    'Builder',
    'BuildError',
    'CommanderBuildError',
    'Commander',
    'LineKind',
    'LineResult',
]
