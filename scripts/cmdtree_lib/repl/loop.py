"""
Interactive read loop for cmdtree.

Reads lines from a prompt_toolkit session and feeds them to
Commander.parse_line until the user types exit or closes input.
"""

import sys
from typing import Callable, Optional, TextIO

from prompt_toolkit.completion import Completer

from cmdtree_lib.common import get_logger
from cmdtree_lib.config import ReplConfig
from cmdtree_lib.tree import Commander

from .completer import commander_completer
from .context import build_session, get_prompt_message

logger = get_logger("repl")


def run(
    cmdr: Commander,
    config: Optional[ReplConfig] = None,
    completer_fn: Optional[Callable[[Commander], Completer]] = None,
    session=None,
    out: Optional[TextIO] = None,
) -> int:
    """
    Run cmdr interactively. Blocks until exit or end of input.

    Args:
        cmdr: Commander to drive
        config: REPL settings, defaults to ReplConfig.from_env()
        completer_fn: Builds the completer again after every parsed line,
            so it can follow the Commander's current path
        session: Anything with a PromptSession-like prompt() method
        out: Sink for help, diagnostics and action output (default stdout)

    Returns:
        Exit code (0)
    """
    if config is None:
        config = ReplConfig.from_env()
    if completer_fn is None:
        def completer_fn(c: Commander) -> Completer:
            return commander_completer(c, word_break=config.word_break)
    completer = completer_fn(cmdr)
    if session is None:
        session = build_session(cmdr, config, completer)
    if out is None:
        out = sys.stdout

    while True:
        try:
            line = session.prompt(get_prompt_message(cmdr, config), completer=completer)
        except KeyboardInterrupt:
            print(file=out)
            continue
        except EOFError:
            print(file=out)
            break

        result = cmdr.parse_line(line, config.colorize, out)
        logger.debug("'%s' -> %s", line, result.kind.name)
        if result.is_exit:
            break
        completer = completer_fn(cmdr)

    return 0
