"""
Command tree node dataclasses for cmdtree.

A tree is made of SubClass nodes (namespaces that can be navigated into)
holding child classes and Action leaves (invocable commands). Names are
lowercased on construction. Children are kept in lists while a Builder is
assembling the tree and frozen into tuples once the tree is finished.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence, TextIO, Union

# Callback signature: (output sink, words following the action name) -> result
ActionCallback = Callable[[TextIO, List[str]], Any]


@dataclass(eq=False)
class Action:
    """An invocable leaf command."""
    name: str
    help: str
    callback: ActionCallback
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self):
        self.name = self.name.lower()

    def call(self, out: TextIO, args: List[str]) -> Any:
        """Invoke the callback. Only one call per action runs at a time."""
        with self._lock:
            return self.callback(out, args)

    def __eq__(self, other):
        if not isinstance(other, Action):
            return NotImplemented
        return self.name == other.name and self.help == other.help


@dataclass
class SubClass:
    """A namespace node owning child classes and actions."""
    name: str
    help: str = ""
    classes: Union[List["SubClass"], Sequence["SubClass"]] = field(default_factory=list)
    actions: Union[List[Action], Sequence[Action]] = field(default_factory=list)

    def __post_init__(self):
        self.name = self.name.lower()

    def find_class(self, name: str):
        """Return the child class called name (already lowercased), or None."""
        for cls in self.classes:
            if cls.name == name:
                return cls
        return None

    def find_action(self, name: str):
        """Return the action called name (already lowercased), or None."""
        for action in self.actions:
            if action.name == name:
                return action
        return None

    def freeze(self) -> "SubClass":
        """Recursively turn child lists into tuples. Returns self."""
        for cls in self.classes:
            cls.freeze()
        self.classes = tuple(self.classes)
        self.actions = tuple(self.actions)
        return self
