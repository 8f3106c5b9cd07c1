"""
cmdtree_lib.repl - prompt_toolkit front end for cmdtree

This package contains the interactive pieces built on the command tree:
- completer: Tree and action-argument completers
- context: Prompt text and PromptSession setup
- loop: The read loop
"""

from .completer import TreeCompleter, ActionArgCompleter, commander_completer
from .context import CMDTREE_STYLE, get_prompt_text, get_prompt_message, build_session
from .loop import run

__all__ = [
    'TreeCompleter',
    'ActionArgCompleter',
    'commander_completer',
    'CMDTREE_STYLE',
    'get_prompt_text',
    'get_prompt_message',
    'build_session',
    'run',
]
