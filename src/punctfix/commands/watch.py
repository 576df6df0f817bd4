"""Command: watch the clipboard and convert punctuation as it changes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from punctfix.commands._base import PunctfixCommand

if TYPE_CHECKING:
    from punctfix.commands._context import AppContext


@click.command(
    cls=PunctfixCommand,
    examples="""\
  punctfix watch
  punctfix watch --oneshot
  punctfix watch --interval 1.5""",
)
@click.option("--oneshot", is_flag=True, help="Convert the clipboard once and exit.")
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Polling interval in seconds (default from [watch] config: 0.5).",
)
@click.pass_obj
def watch(app: AppContext, oneshot: bool, interval: float | None) -> None:
    """Rewrite clipboard text and HTML whenever they gain full-width punctuation."""
    from punctfix.infrastructure.clipboard import SystemClipboard
    from punctfix.services.watch import ClipboardWatcher

    settings = app.settings
    if interval is not None:
        watch_cfg = settings.watch.model_copy(update={"interval": interval})
        settings = settings.model_copy(update={"watch": watch_cfg})

    watcher = ClipboardWatcher(settings, SystemClipboard())

    if oneshot or settings.watch.oneshot:
        app.emit(watcher.poll_once())
        return

    if not settings.quiet and not settings.json_output:
        click.echo(
            f"Watching clipboard every {settings.watch.interval:g}s (Ctrl+C to stop)",
            err=True,
        )
    try:
        watcher.run(report=app.notify)
    except KeyboardInterrupt:
        click.echo("Stopped.", err=True)
