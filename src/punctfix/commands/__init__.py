"""Subcommand modules for punctfix.

Provides register_commands() which uses deferred imports to keep
``punctfix --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from punctfix.commands.convert import convert
    from punctfix.commands.watch import watch

    cli.add_command(convert)
    cli.add_command(watch)
