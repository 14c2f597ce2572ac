"""Terminal detection for the build tool's coloured output."""

from __future__ import annotations

import os

from rich.console import Console


def force_build_color(console: Console | None = None) -> bool:
    """
    Return True if the build tool should be told to force coloured output.

    The build tool's stderr is piped through ours, so it cannot see the
    terminal itself. On Windows colour travels over a side channel and this
    is always False.
    """
    if os.name == "nt":
        return False
    console = console or Console(stderr=True)
    return console.is_terminal
