"""Rich Console factory and theme for conectl output.

Consoles render into a StringIO buffer so renderers return plain
strings.  Outside a terminal (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CONE_THEME = Theme(
    {
        "cone.ok": "bold green",
        "cone.error": "bold red",
        "cone.warning": "bold yellow",
        "cone.op": "bold cyan",
        "cone.key": "dim",
        "cone.greeting": "bold",
        "cone.closing": "italic",
        "cone.kind.base": "yellow",
        "cone.kind.middle": "magenta",
        "cone.kind.topping": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=CONE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Rich style name for an ingredient kind ("" when unknown)."""
    return f"cone.kind.{kind}" if kind in ("base", "middle", "topping") else ""
