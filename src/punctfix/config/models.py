"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, punctfix.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class WatchConfig(BaseModel):
    """[watch] section."""

    model_config = {"frozen": True}

    interval: float = Field(default=0.5, gt=0)
    oneshot: bool = False


class ConvertConfig(BaseModel):
    """[convert] section."""

    model_config = {"frozen": True}

    html_suffixes: list[str] = Field(default_factory=lambda: [".html", ".htm", ".xhtml"])
