"""Locate the punctfix.toml that applies to a run.

Precedence: ``--config``, then ``PUNCTFIX_CONFIG``, then the nearest
``punctfix.toml`` in the start directory or any parent.  A file named
explicitly must exist; finding nothing on the walk-up just means code
defaults.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import click

CONFIG_FILENAME = "punctfix.toml"
CONFIG_ENV_VAR = "PUNCTFIX_CONFIG"


class ConfigNotFoundError(click.ClickException):
    """A config file named by ``--config`` or ``PUNCTFIX_CONFIG`` does not exist."""

    def __init__(self, path: Path, source: str) -> None:
        super().__init__(f"Config file from {source} not found: {path}")
        self.path = path
        self.source = source


def iter_candidates(start: Path | None = None) -> Iterator[Path]:
    """Yield ``punctfix.toml`` locations from *start* (default: cwd) up to the root."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file for this run, or None to use code defaults.

    Raises:
        ConfigNotFoundError: *explicit* or ``PUNCTFIX_CONFIG`` names a missing file.
    """
    named = (("--config", explicit), (CONFIG_ENV_VAR, os.environ.get(CONFIG_ENV_VAR)))
    for source, value in named:
        if value:
            path = Path(value)
            if not path.is_file():
                raise ConfigNotFoundError(path, source)
            return path
    return next((p for p in iter_candidates(start) if p.is_file()), None)
