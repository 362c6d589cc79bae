"""Rich Console factory and theme for epochctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

EPOCH_THEME = Theme(
    {
        "epoch.label": "bold green",
        "epoch.error": "bold red",
        "epoch.op": "bold cyan",
    }
)


def create_console(
    *,
    no_color: bool = False,
    width: int | None = None,
    force_terminal: bool | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
        force_terminal: Emit styles even though the buffer is not a TTY.
            Set when the rendered text is headed for a real terminal.
    """
    return Console(
        file=StringIO(),
        theme=EPOCH_THEME,
        no_color=no_color,
        highlight=False,
        force_terminal=force_terminal,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
