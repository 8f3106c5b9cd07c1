"""
Builder for cmdtree command trees.

Calls are chained to describe the tree, with begin_class/end_class pairs
nesting classes:

    cmdr = (
        Builder("example")
        .begin_class("class1", "class1 help message")
            .begin_class("inner-class1", "nested class!")
                .add_action("name", "print class name", lambda out, args: out.write("inner-class1\\n"))
            .end_class()
        .end_class()
        .into_commander()
    )

The first failing call is recorded in Builder.error and every later call in
the chain is skipped. into_commander() raises CommanderBuildError if an
error was recorded.
"""

from typing import List, Optional

from cmdtree_lib.common import get_logger
from cmdtree_lib.config import ROOT_HELP

from .commander import Commander
from .nodes import Action, ActionCallback, SubClass
from .validation import BuildError, CommanderBuildError, check_names

logger = get_logger("builder")


class Builder:
    """Stack-based constructor for a Commander tree."""

    def __init__(self, root_name: str, help_msg: str = ROOT_HELP):
        self.parents: List[SubClass] = []
        self.current = SubClass(root_name, help_msg)
        self.error: Optional[BuildError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def _fail(self, err: BuildError) -> "Builder":
        logger.debug("build failed in '%s': %s", self.current.name, err.name)
        self.error = err
        return self

    def begin_class(self, name: str, help_msg: str = "") -> "Builder":
        """Start a new nested class. Fails if the name is taken."""
        if not self.ok:
            return self
        err = check_names(name, self.current)
        if err:
            return self._fail(err)
        self.parents.append(self.current)
        self.current = SubClass(name, help_msg)
        return self

    def end_class(self) -> "Builder":
        """Close the current class and move to its parent."""
        if not self.ok:
            return self
        if not self.parents:
            return self._fail(BuildError.NO_PARENT)
        parent = self.parents.pop()
        parent.classes.append(self.current)
        self.current = parent
        return self

    def add_action(self, name: str, help_msg: str, callback: ActionCallback) -> "Builder":
        """
        Add an action to the current class.

        The callback receives the output sink and the words that followed
        the action name on the line.
        """
        if not self.ok:
            return self
        err = check_names(name, self.current)
        if err:
            return self._fail(err)
        self.current.actions.append(Action(name, help_msg, callback))
        return self

    def root(self) -> "Builder":
        """Close every open class, returning to the root."""
        while self.ok and self.parents:
            self.end_class()
        return self

    def into_commander(self) -> Commander:
        """
        Finish the tree and return a Commander positioned at the root.

        Open classes are closed first, so this can be called at any depth.

        Raises:
            CommanderBuildError: If any earlier call in the chain failed
        """
        self.root()
        if not self.ok:
            raise CommanderBuildError(self.error)
        root = self.current.freeze()
        logger.debug("built command tree '%s'", root.name)
        return Commander(root)
