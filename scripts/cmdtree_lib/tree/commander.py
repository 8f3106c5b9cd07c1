"""
Commander: a finished command tree plus the cursor of one session.

The tree is shared and never modified after the Builder freezes it. Only
the cursor (current class and its dotted path) changes as lines are parsed.
"""

import sys
from typing import List, Optional, TextIO

from cmdtree_lib.common import get_logger
from cmdtree_lib.config import ACTION_SEPARATOR, CLASS_SEPARATOR

from .completion import ItemType, StructureInfo
from .display import write_help, write_unrecognized
from .nodes import SubClass
from .parse import LineKind, LineResult, WordKind, parse_word, split_line

logger = get_logger("commander")


class Commander:
    """Command tree with a current position."""

    def __init__(self, root: SubClass, current: Optional[SubClass] = None, path: Optional[str] = None):
        self.root = root
        self.current = current if current is not None else root
        self.path = path if path is not None else root.name

    def __repr__(self):
        return f"Commander(path={self.path!r})"

    @property
    def root_name(self) -> str:
        return self.root.name

    @property
    def at_root(self) -> bool:
        return self.current is self.root

    def clone(self) -> "Commander":
        """A Commander over the same tree with its own cursor."""
        return Commander(self.root, self.current, self.path)

    def parse_line(self, line: str, colorize: bool = True, out: Optional[TextIO] = None) -> LineResult:
        """
        Resolve one line of input against the current class.

        Words are taken left to right. Class names navigate further in,
        anything else ends the line:

        - help: print help for the class reached so far
        - cancel / c: return to the root
        - exit: signal the caller to stop
        - an action: call it with the remaining words
        - no match: print a diagnostic

        Only a line made entirely of class names moves the cursor (and
        cancel, which resets it to the root).

        Args:
            line: Raw input line
            colorize: Use ANSI colors in help and diagnostics
            out: Where help, diagnostics and action output go (default stdout)

        Returns:
            LineResult describing the outcome
        """
        if out is None:
            out = sys.stdout

        words = split_line(line)
        working = self.current
        working_path = self.path

        for idx, word in enumerate(words):
            res = parse_word(working, word)

            if res.kind is WordKind.HELP:
                write_help(res.target, out, colorize)
                return LineResult(LineKind.HELP)

            if res.kind is WordKind.CANCEL:
                self.current = self.root
                self.path = self.root.name
                return LineResult(LineKind.CANCEL)

            if res.kind is WordKind.EXIT:
                return LineResult(LineKind.EXIT)

            if res.kind is WordKind.CLASS:
                working = res.target
                working_path = f"{working_path}{CLASS_SEPARATOR}{working.name}"
                continue

            if res.kind is WordKind.ACTION:
                args = words[idx + 1:]
                logger.debug("calling action '%s' with %s", res.target.name, args)
                value = res.target.call(out, args)
                return LineResult(LineKind.ACTION, value)

            write_unrecognized(word, out, colorize)
            return LineResult(LineKind.UNRECOGNIZED)

        self.current = working
        self.path = working_path
        return LineResult(LineKind.CLASS)

    def structure(self, from_root: bool = True) -> List[StructureInfo]:
        """
        Flatten the tree into qualified paths, sorted by path.

        Args:
            from_root: Start at the root, otherwise at the current class

        Returns:
            StructureInfo entries, starting with the traversal root ("")
        """
        start = self.root if from_root else self.current
        entries = [StructureInfo("", ItemType.CLASS, start.help)]
        for action in start.actions:
            entries.append(StructureInfo(f"{ACTION_SEPARATOR}{action.name}", ItemType.ACTION, action.help))

        stack = [(cls.name, cls) for cls in start.classes]
        while stack:
            path, node = stack.pop()
            entries.append(StructureInfo(path, ItemType.CLASS, node.help))
            for action in node.actions:
                entries.append(StructureInfo(f"{path}{ACTION_SEPARATOR}{action.name}", ItemType.ACTION, action.help))
            for cls in node.classes:
                stack.append((f"{path}{CLASS_SEPARATOR}{cls.name}", cls))

        return sorted(entries, key=lambda info: info.path)
