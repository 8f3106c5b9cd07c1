"""
ANSI color codes and console message helpers for cmdtree.
"""

import os
import sys
from typing import Optional, TextIO


class Colors:
    """ANSI color escape codes for terminal output."""
    CYAN = "\033[0;36m"
    BRIGHT_RED = "\033[0;91m"
    BRIGHT_YELLOW = "\033[0;93m"
    BRIGHT_MAGENTA = "\033[0;95m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


def paint(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in a color code, or return it unchanged when disabled."""
    if not enabled:
        return text
    return f"{color}{text}{Colors.NC}"


def should_colorize(stream: Optional[TextIO] = None) -> bool:
    """
    Decide whether ANSI colors should be written to a stream.

    NO_COLOR disables colors, FORCE_COLOR forces them, otherwise colors
    are used only when the stream is a TTY.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def info(msg: str) -> None:
    """Log an informational message in cyan."""
    print(f"{Colors.CYAN}[i]{Colors.NC} {msg}")
