"""Rich console for building human-readable output as a string.

Renderers draw into a console backed by a string buffer and hand the text
back to :mod:`uvmake.commands._context`, which decides between stdout
and stderr.  Rich drops color codes by itself when stdout is not a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

UVMAKE_THEME = Theme(
    {
        "uvm.ok": "bold green",
        "uvm.error": "bold red",
        "uvm.warning": "bold yellow",
        "uvm.hint": "yellow",
        "uvm.heading": "bold cyan",
        "uvm.command": "bold",
        "uvm.path": "dim",
        "uvm.version": "bold blue",
        "uvm.dir": "bold blue",
    }
)

# Separator under the menu and banner headings.
RULE = "━" * 40


def create_console(width: int = 100) -> Console:
    # emoji=False: status lines carry literal emoji, not :shortcodes:.
    return Console(file=StringIO(), theme=UVMAKE_THEME, highlight=False, emoji=False, width=width)


def get_output(console: Console) -> str:
    """Return everything drawn on a console from :func:`create_console`."""
    if not isinstance(console.file, StringIO):
        raise TypeError("console does not render to a string buffer")
    return console.file.getvalue()
