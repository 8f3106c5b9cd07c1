#!/usr/bin/env python3
"""
cmdtree_repl.py - Example interactive console built with cmdtree

Try TAB after typing a partial path, or after "path " / "nested path "
to complete file names as action arguments.
"""

import argparse
import sys

from prompt_toolkit.completion import PathCompleter

from cmdtree_lib import Builder, Commander
from cmdtree_lib.common import Colors, info
from cmdtree_lib.config import ReplConfig
from cmdtree_lib.repl import commander_completer, run


def cmd_echo(out, args: list[str]) -> None:
    """Echo the arguments back."""
    out.write(" ".join(args) + "\n")


def cmd_countdown(out, args: list[str]) -> None:
    """Count down from the first argument (default 3)."""
    try:
        start = int(args[0]) if args else 3
    except ValueError:
        out.write(f"not a number: {args[0]}\n")
        return
    for n in range(start, 0, -1):
        out.write(f"{n}\n")


def cmd_path(out, args: list[str]) -> None:
    """Print the given path."""
    out.write(f"path: {' '.join(args)}\n")


def build_demo_commander(root_name: str = "cmdtree-example") -> Commander:
    """Build the example tree."""
    return (
        Builder(root_name)
        .begin_class("class1", "class1 help message")
            .begin_class("inner-class1", "nested class!")
                .add_action("name", "print class name", lambda out, args: out.write("inner-class1\n"))
            .end_class()
        .end_class()
        .begin_class("print", "printing actions")
            .add_action("echo", "echo the arguments", cmd_echo)
            .add_action("countdown", "count down from a number", cmd_countdown)
        .end_class()
        .add_action("path", "complete path names", cmd_path)
        .add_action("no-complete", "no argument completion", lambda out, args: None)
        .begin_class("nested", "class with its own path action")
            .add_action("path", "complete path names", cmd_path)
        .into_commander()
    )


# Actions whose arguments get file name completion, by qualified path
PATH_ACTIONS = ("..path", "nested..path")


def main() -> int:
    parser = argparse.ArgumentParser(description="cmdtree example console")
    parser.add_argument("--history", help="History file, or 'none' (default: ~/.cmdtree_history)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    args = parser.parse_args()

    config = ReplConfig.from_env(args.history)
    if args.no_color:
        config.colorize = False

    cmdr = build_demo_commander()
    arg_completers = {path: PathCompleter() for path in PATH_ACTIONS}

    print()
    print(f"{Colors.BOLD}cmdtree example{Colors.NC}")
    info("Type 'help' for commands, 'exit' to quit")
    print()

    return run(
        cmdr,
        config,
        completer_fn=lambda c: commander_completer(c, arg_completers, config.word_break),
    )


if __name__ == "__main__":
    sys.exit(main())
