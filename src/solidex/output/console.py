"""Rich Console factory and theme for solidex output.

Consoles render into a StringIO buffer so every formatter returns a
plain ``str``. In non-TTY environments (tests, pipes) Rich drops color
codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SOLIDEX_THEME = Theme(
    {
        "solidex.error": "bold red",
        "solidex.header": "bold",
        "solidex.principle.srp": "cyan",
        "solidex.principle.ocp": "green",
        "solidex.principle.lsp": "yellow",
        "solidex.principle.isp": "magenta",
        "solidex.principle.dip": "blue",
        "solidex.plugin": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=SOLIDEX_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_principle(principle: str) -> str:
    """Rich style name for a principle value such as ``"ocp"``."""
    style = f"solidex.principle.{principle}"
    return style if style in SOLIDEX_THEME.styles else ""
