"""
Help and diagnostic text written by the line resolver.
"""

from typing import TextIO

from cmdtree_lib.common import Colors, paint

from .nodes import SubClass


def write_help(subclass: SubClass, out: TextIO, colorize: bool = True) -> None:
    """Write the reserved words, then the classes and actions of subclass."""
    def name(text: str) -> str:
        return paint(text, Colors.BRIGHT_YELLOW, colorize)

    def heading(text: str) -> str:
        return paint(text, Colors.BRIGHT_MAGENTA, colorize)

    out.write(f"{name('help')} -- prints the help messages\n")
    out.write(f"{name('cancel')} | {name('c')} -- returns to the root class\n")
    out.write(f"{name('exit')} -- sends the exit signal to end the interactive loop\n")

    if subclass.classes:
        out.write(f"{heading('Classes:')}\n")
        for cls in subclass.classes:
            out.write(f"\t{name(cls.name)} -- {cls.help}\n")

    if subclass.actions:
        out.write(f"{heading('Actions:')}\n")
        for action in subclass.actions:
            out.write(f"\t{name(action.name)} -- {action.help}\n")


def write_unrecognized(word: str, out: TextIO, colorize: bool = True) -> None:
    """Write the diagnostic for a word that matched nothing."""
    msg = f"'{word}' does not match any keywords, classes, or actions"
    out.write(f"{paint(msg, Colors.BRIGHT_RED, colorize)}\n")
