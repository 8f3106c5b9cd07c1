"""
Completion candidates for cmdtree.

The tree is flattened into qualified paths by Commander.structure:

    ""                  the traversal root
    "one"               class
    "one.two"           nested class
    "one.two..three"    action "three" inside one.two
    "..top"             action directly on the traversal root

The functions below turn those paths into space separated candidates and
match candidates against a partially typed line. No I/O happens here;
cmdtree_lib.repl.completer wires them into prompt_toolkit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List

from cmdtree_lib.config import ACTION_SEPARATOR, CLASS_SEPARATOR, WORD_BREAK

if TYPE_CHECKING:
    from .commander import Commander


class ItemType(Enum):
    CLASS = "class"
    ACTION = "action"


@dataclass(frozen=True)
class StructureInfo:
    """One entry of the flattened tree."""
    path: str
    itemtype: ItemType
    help_msg: str


@dataclass(frozen=True)
class ActionMatch:
    """
    An action reachable from the current class.

    match_str is what the user types to reach the action (space separated,
    with a trailing space). qualified_path is the root-relative structure
    path, e.g. "nested..path", and identifies the action unambiguously.
    """
    match_str: str
    qualified_path: str
    info: StructureInfo


def path_to_words(path: str) -> str:
    """Turn a qualified path into space separated words."""
    return " ".join(seg for seg in path.split(CLASS_SEPARATOR) if seg)


def create_tree_completion_items(cmdr: "Commander") -> List[str]:
    """
    Space delimited items that could be completed at the current path,
    e.g. ['hello', 'one', 'one two', 'one two three'].
    """
    items = (path_to_words(info.path) for info in cmdr.structure(False))
    return [item for item in items if item]


def create_action_completion_items(cmdr: "Commander") -> List[ActionMatch]:
    """
    Actions below the current class, with the text that reaches them.

    Use the qualified_path of the returned items to decide which actions
    should get argument completion.
    """
    # Path of the current class relative to the root, "" at the root
    rel = cmdr.path[len(cmdr.root_name) + 1:] if not cmdr.at_root else ""
    prefix = rel + CLASS_SEPARATOR if rel else ""

    matches = []
    for info in cmdr.structure(True):
        if ACTION_SEPARATOR not in info.path:
            continue
        if prefix and not info.path.startswith(prefix):
            continue
        match_str = path_to_words(info.path[len(prefix):]) + " "
        matches.append(ActionMatch(match_str=match_str, qualified_path=info.path, info=info))
    return matches


def word_break_start(s: str, word_break: str = WORD_BREAK) -> int:
    """
    Index just past the last word break character in s, or 0 if there is
    none. Safe for empty strings and strings made only of break characters.
    """
    start = len(s)
    for idx in range(len(s) - 1, -1, -1):
        if s[idx] in word_break:
            break
        start = idx
    return start


def tree_completions(line: str, items: Iterable[str], word_break: str = WORD_BREAK) -> List[str]:
    """
    Items that could complete line, trimmed to the last word of line.

    Only the part from the start of the word being typed is returned, so
    "hello wo" yields "world" and "he" yields "hello world".

    >>> tree_completions("one", ["one", "one two", "only"])
    ['one', 'one two']
    """
    idx = word_break_start(line, word_break)
    return [item[idx:] for item in items if item.startswith(line)]
