"""
Word and line resolution types for cmdtree.

parse_word resolves a single word against a class. Commander.parse_line
walks a whole line with it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from cmdtree_lib.config import CANCEL_WORDS, EXIT_WORD, HELP_WORD

from .nodes import Action, SubClass


class WordKind(Enum):
    HELP = "help"
    CANCEL = "cancel"
    EXIT = "exit"
    CLASS = "class"
    ACTION = "action"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class WordResult:
    """What a single word resolved to. target is the matched class or action."""
    kind: WordKind
    target: Optional[Any] = None


class LineKind(Enum):
    HELP = "help"
    CANCEL = "cancel"
    EXIT = "exit"
    CLASS = "class"
    ACTION = "action"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class LineResult:
    """Outcome of parsing one line. value holds the action's return value."""
    kind: LineKind
    value: Any = None

    @property
    def is_exit(self) -> bool:
        return self.kind is LineKind.EXIT


def split_line(line: str) -> List[str]:
    """
    Split a raw input line into words.

    Newlines and carriage returns are removed, the line is trimmed and then
    split on every single space, so runs of spaces give empty words.
    """
    return line.replace("\n", "").replace("\r", "").strip().split(" ")


def parse_word(subclass: SubClass, word: str) -> WordResult:
    """Resolve word against subclass: reserved word, then class, then action."""
    lwr = word.lower()
    if lwr == HELP_WORD:
        return WordResult(WordKind.HELP, subclass)
    if lwr in CANCEL_WORDS:
        return WordResult(WordKind.CANCEL)
    if lwr == EXIT_WORD:
        return WordResult(WordKind.EXIT)

    cls = subclass.find_class(lwr)
    if cls is not None:
        return WordResult(WordKind.CLASS, cls)
    action: Optional[Action] = subclass.find_action(lwr)
    if action is not None:
        return WordResult(WordKind.ACTION, action)
    return WordResult(WordKind.UNRECOGNIZED)
