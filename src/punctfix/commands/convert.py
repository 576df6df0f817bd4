"""Command: convert punctuation in text, files, or stdin."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from punctfix.commands._base import PunctfixCommand

if TYPE_CHECKING:
    from punctfix.commands._context import AppContext


@click.command(
    cls=PunctfixCommand,
    examples="""\
  punctfix convert "你好，世界！"
  echo "你好，世界！" | punctfix convert
  punctfix convert --file notes.txt --in-place
  punctfix convert --file page.html
  pbpaste | punctfix convert --format html""",
)
@click.argument("text", nargs=-1)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Read input from a file.",
)
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["auto", "text", "html"]),
    default="auto",
    help="Input format. 'auto' picks HTML by file suffix, otherwise text.",
)
@click.option("-i", "--in-place", is_flag=True, help="Write the result back to --file.")
@click.pass_obj
def convert(
    app: AppContext,
    text: tuple[str, ...],
    file_path: Path | None,
    input_format: str,
    in_place: bool,
) -> None:
    """Convert full-width punctuation to half-width.

    Reads TEXT arguments, a --file, or stdin (in that order of preference).
    """
    from punctfix.services.convert import ConvertService

    if in_place and file_path is None:
        raise click.UsageError("--in-place requires --file.")

    svc = ConvertService(app.settings)
    html = input_format == "html"

    if file_path is not None:
        force = None if input_format == "auto" else html
        app.emit(svc.convert_file(file_path, html=force, in_place=in_place))
    elif text:
        joined = " ".join(text)
        app.emit(svc.convert_html(joined) if html else svc.convert_text(joined))
    elif html:
        app.emit(svc.convert_html(sys.stdin.buffer.read()))
    else:
        app.emit(svc.convert_text(sys.stdin.read()))
