"""Rich rendering primitives for punctfix status lines.

Status lines are rendered into a StringIO-backed Console and handed back
as strings, so AppContext decides where they go (stderr beside verbatim
converted text, stdout otherwise).  Rich drops color codes on its own
when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

PUNCTFIX_THEME = Theme(
    {
        "pf.ok": "bold green",
        "pf.unchanged": "yellow",
        "pf.error": "bold red",
        "pf.op": "bold cyan",
        "pf.key": "dim",
        "pf.format.html": "magenta",
        "pf.format.text": "blue",
    }
)

STATUS_WIDTH = 100


def create_console(*, no_color: bool = False, width: int = STATUS_WIDTH) -> Console:
    """Console writing to a StringIO buffer.

    ``soft_wrap`` keeps long file paths on one line.
    """
    return Console(
        file=StringIO(),
        theme=PUNCTFIX_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width,
    )


def rendered(console: Console) -> str:
    """Text written to a :func:`create_console` buffer, without the final newline."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")


def status_label(changed: bool | None) -> Text:
    """``UNCHANGED`` when a result reports no change, ``OK`` otherwise."""
    if changed is False:
        return Text("UNCHANGED", style="pf.unchanged")
    return Text("OK", style="pf.ok")


def format_badge(fmt: str) -> Text:
    """The input format (``text`` or ``html``) in its theme color."""
    style = f"pf.format.{fmt}"
    return Text(fmt, style=style if style in PUNCTFIX_THEME.styles else "")
