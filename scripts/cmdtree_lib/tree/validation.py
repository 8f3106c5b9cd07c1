"""
Name validation for cmdtree.

Within one class, reserved words, child class names and action names must
all be distinct (case-insensitive).
"""

from enum import Enum
from typing import Optional

from cmdtree_lib.config import RESERVED_WORDS

from .nodes import SubClass


class BuildError(Enum):
    """Error variants when building a Commander."""
    NAME_EXISTS_AS_CLASS = "name already exists as a class"
    NAME_EXISTS_AS_ACTION = "name already exists as an action"
    NO_PARENT = "no parent class to return to"


class CommanderBuildError(Exception):
    """Raised by into_commander() when the builder chain failed."""

    def __init__(self, error: BuildError):
        self.error = error
        super().__init__(error.value)


def check_names(name: str, subclass: SubClass) -> Optional[BuildError]:
    """
    Check whether name can be added to subclass.

    Reserved words report as NAME_EXISTS_AS_ACTION.
    Returns None if the name is free.

    An empty name is accepted. split_line turns runs of spaces into empty
    words, so such a node is reached by typing two spaces.
    """
    lwr = name.lower()
    if lwr in RESERVED_WORDS or subclass.find_action(lwr) is not None:
        return BuildError.NAME_EXISTS_AS_ACTION
    if subclass.find_class(lwr) is not None:
        return BuildError.NAME_EXISTS_AS_CLASS
    return None
