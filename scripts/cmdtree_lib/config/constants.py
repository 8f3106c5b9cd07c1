"""
Constants for cmdtree.

Reserved words, separators and default values shared by the command tree
and the interactive REPL.
"""

from pathlib import Path


# Words resolved before any class or action lookup, in every class
HELP_WORD = "help"
CANCEL_WORDS = ("cancel", "c")
EXIT_WORD = "exit"
RESERVED_WORDS = frozenset((HELP_WORD, *CANCEL_WORDS, EXIT_WORD))

# Qualified paths: "a.b" is a class, "a.b..name" is an action inside it
CLASS_SEPARATOR = "."
ACTION_SEPARATOR = ".."

ROOT_HELP = "base class of commander tree"

# REPL defaults
HISTORY_FILE = Path.home() / ".cmdtree_history"
PROMPT_SUFFIX = "=> "
WORD_BREAK = " "
