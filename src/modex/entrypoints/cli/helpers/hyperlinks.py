"""OSC-8 terminal hyperlinks with a plain-text fallback."""

import os
import sys
from typing import TextIO

_OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort check whether `stream` (default stdout) renders OSC-8 links.

    Non-TTY streams never do. Otherwise the terminal is recognized from
    ``TERM_PROGRAM``, ``WT_SESSION``, ``VTE_VERSION`` or ``TERM``.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in _OSC8_TERMINALS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(target: str, label: str | None = None, stream: TextIO | None = None) -> str:
    """Render `target` as a clickable link, or as plain text when unsupported.

    Args:
        target: URL (e.g. ``file:///tmp``) the link points to.
        label: Visible text; defaults to `target`.
        stream: Stream the text will be written to (default stdout).
    """
    label = label or target
    if not supports_osc8(stream):
        return label
    return f"\x1b]8;;{target}\x07{label}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
