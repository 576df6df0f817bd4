"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich status lines) or machines
(--json).  Converted content itself is always written verbatim so that
``punctfix convert < in.txt > out.txt`` round-trips cleanly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from punctfix.output.console import create_console, format_badge, rendered, status_label

if TYPE_CHECKING:
    from rich.console import Console

    from punctfix.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        return render_error(result, verbose=settings.verbose)
    if "text" in result.data:
        return str(result.data["text"])
    if settings.quiet:
        return f"OK: {result.op}"
    return render_status(result, verbose=settings.verbose)


def format_status(result: ServiceResult, *, settings: OutputSettings | None = None) -> str | None:
    """Status line for stderr alongside verbatim content, or None in quiet/JSON mode."""
    settings = settings or OutputSettings()
    if settings.json_output or settings.quiet or not result.ok:
        return None
    return render_status(result, verbose=settings.verbose)


def render_status(result: ServiceResult, *, verbose: bool = False) -> str:
    console = create_console()
    label = status_label(result.data.get("changed"))
    console.print(label, Text(f"  {result.op}", style="pf.op"))
    keys = ("path", "format", "reason", "length", *(("written",) if verbose else ()))
    for key in keys:
        if key not in result.data:
            continue
        value = result.data[key]
        if key == "format":
            console.print(Text("  format: ", style="pf.key"), format_badge(str(value)), sep="")
        else:
            _field(console, key, value)
    return rendered(console)


def render_error(result: ServiceResult, *, verbose: bool = False) -> str:
    console = create_console()
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pf.error")
    op = Text(f"  {result.op}", style="pf.op")
    console.print(label, op, " — ", Text(msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
    return rendered(console)


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="pf.key"), Text(str(value)), sep="")
