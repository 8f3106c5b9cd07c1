"""
Prompt and session setup for cmdtree REPLs.

This module contains:
- get_prompt_text: The prompt string for the Commander's current path
- get_prompt_message: The same prompt as styled prompt_toolkit text
- build_session: A PromptSession with history, completion and style
"""

from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.styles import Style

from cmdtree_lib.common import get_logger
from cmdtree_lib.config import ReplConfig
from cmdtree_lib.tree import Commander

from .completer import commander_completer

logger = get_logger("repl")

CMDTREE_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
    'prompt.path': '#00aaaa bold',
})


def get_prompt_text(cmdr: Commander, config: Optional[ReplConfig] = None) -> str:
    """Generate the prompt string based on the current path."""
    config = config or ReplConfig()
    return f"{cmdr.path}{config.prompt_suffix}"


def get_prompt_message(cmdr: Commander, config: ReplConfig):
    """Prompt as styled fragments, or plain text when colors are off."""
    if not config.colorize:
        return get_prompt_text(cmdr, config)
    return FormattedText([
        ('class:prompt.path', cmdr.path),
        ('class:prompt', config.prompt_suffix),
    ])


def build_session(cmdr: Commander, config: ReplConfig, completer: Optional[Completer] = None,
                  **kwargs) -> PromptSession:
    """
    Create the prompt session for a REPL.

    Args:
        cmdr: Commander the session will drive
        config: REPL settings (history file, colors)
        completer: Initial completer, defaults to tree completion
        **kwargs: Passed through to PromptSession (e.g. input, output)

    Returns:
        PromptSession ready for run()
    """
    if config.history_file:
        config.history_file.parent.mkdir(parents=True, exist_ok=True)
        history = FileHistory(str(config.history_file))
    else:
        history = InMemoryHistory()
    logger.debug("session history: %s", config.history_file or "memory")

    return PromptSession(
        history=history,
        completer=completer or commander_completer(cmdr, word_break=config.word_break),
        style=CMDTREE_STYLE,
        **kwargs,
    )
