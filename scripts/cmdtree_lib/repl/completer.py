"""
Tab completion for cmdtree REPLs.

This module adapts the completion candidates of cmdtree_lib.tree.completion
to prompt_toolkit completers.
"""

from typing import Dict, List, Optional

from prompt_toolkit.completion import Completer, Completion, merge_completers
from prompt_toolkit.document import Document

from cmdtree_lib.config import WORD_BREAK
from cmdtree_lib.tree import (
    ActionMatch,
    Commander,
    create_action_completion_items,
    create_tree_completion_items,
    tree_completions,
    word_break_start,
)


class TreeCompleter(Completer):
    """Completes class and action paths below the current class."""

    def __init__(self, items: List[str], word_break: str = WORD_BREAK):
        self.items = items
        self.word_break = word_break

    @classmethod
    def for_commander(cls, cmdr: Commander, word_break: str = WORD_BREAK) -> "TreeCompleter":
        return cls(create_tree_completion_items(cmdr), word_break)

    def get_completions(self, document, complete_event):
        line = document.text_before_cursor
        start = word_break_start(line, self.word_break)
        for suffix in tree_completions(line, self.items, self.word_break):
            yield Completion(suffix, start_position=start - len(line))


class ActionArgCompleter(Completer):
    """
    Completes the arguments of specific actions.

    completers maps an action's qualified path (e.g. "..path" for an action
    on the root, "nested..path" inside class "nested") to the completer used
    for the text typed after that action.
    """

    def __init__(self, items: List[ActionMatch], completers: Dict[str, Completer]):
        self.items = items
        self.completers = completers

    def find_match(self, line: str) -> Optional[ActionMatch]:
        """Return the completable action that line invokes, if any. Names match case-insensitively."""
        lwr = line.lower()
        for item in self.items:
            if item.qualified_path in self.completers and lwr.startswith(item.match_str):
                return item
        return None

    def get_completions(self, document, complete_event):
        line = document.text_before_cursor
        match = self.find_match(line)
        if match is None:
            return

        # Portion of the line holding the action's arguments
        arg_line = line[len(match.match_str):]
        arg_document = Document(arg_line, cursor_position=len(arg_line))
        yield from self.completers[match.qualified_path].get_completions(arg_document, complete_event)


def commander_completer(cmdr: Commander, arg_completers: Optional[Dict[str, Completer]] = None,
                        word_break: str = WORD_BREAK) -> Completer:
    """Tree completion for cmdr, plus argument completion for the given actions."""
    tree = TreeCompleter.for_commander(cmdr, word_break)
    if not arg_completers:
        return tree
    args = ActionArgCompleter(create_action_completion_items(cmdr), arg_completers)
    return merge_completers([tree, args])
