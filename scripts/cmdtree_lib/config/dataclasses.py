"""
REPL configuration for cmdtree.

Settings are resolved from explicit arguments, then environment variables,
then the defaults in constants.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cmdtree_lib.common import should_colorize

from .constants import HISTORY_FILE, PROMPT_SUFFIX, WORD_BREAK


@dataclass
class ReplConfig:
    """Settings for an interactive cmdtree session."""
    colorize: bool = True
    history_file: Optional[Path] = HISTORY_FILE  # None keeps history in memory
    prompt_suffix: str = PROMPT_SUFFIX
    word_break: str = WORD_BREAK

    @classmethod
    def from_env(cls, history_file: Optional[str] = None) -> "ReplConfig":
        """
        Build a config from the environment.

        Args:
            history_file: Explicit history path, overrides CMDTREE_HISTORY

        Returns:
            ReplConfig with colorize and history_file resolved

        CMDTREE_HISTORY=none disables the history file. Colors follow
        should_colorize(sys.stdout): NO_COLOR wins, then FORCE_COLOR, then
        TTY detection.
        """
        return cls(
            colorize=should_colorize(sys.stdout),
            history_file=get_history_file(history_file),
        )


def get_history_file(arg_path: Optional[str] = None) -> Optional[Path]:
    """Get history file from args, env, or default."""
    value = arg_path or os.environ.get("CMDTREE_HISTORY")
    if not value:
        return HISTORY_FILE
    if value.lower() == "none":
        return None
    return Path(value).expanduser()
