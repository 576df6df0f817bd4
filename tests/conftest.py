"""Shared pytest fixtures and test helpers for punctfix tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from punctfix.config.settings import PunctfixSettings


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep stray punctfix.toml files and PUNCTFIX_* env vars out of tests."""
    monkeypatch.delenv("PUNCTFIX_CONFIG", raising=False)
    monkeypatch.delenv("PUNCTFIX_WATCH__INTERVAL", raising=False)
    monkeypatch.delenv("PUNCTFIX_WATCH__ONESHOT", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> PunctfixSettings:
    """Settings with code defaults only."""
    return PunctfixSettings.from_cli(start=tmp_path)


class FakeClipboard:
    """In-memory clipboard recording every write."""

    def __init__(self, text: str = "", html: str | None = None) -> None:
        self.text = text
        self.html = html
        self.writes: list[str] = []
        self.rich_writes: list[tuple[str, str | None]] = []
        self.fail_reads = False
        self.fail_html_reads = False
        self.fail_writes = False

    def get_html(self) -> str | None:
        from punctfix.infrastructure.clipboard import ClipboardError

        if self.fail_html_reads:
            raise ClipboardError("Failed to read clipboard HTML: no backend")
        return self.html

    def set_rich(self, html: str, text: str | None) -> None:
        from punctfix.infrastructure.clipboard import ClipboardError

        if self.fail_writes:
            raise ClipboardError("Failed to set clipboard HTML: no backend")
        self.html = html
        if text is not None:
            self.text = text
        self.rich_writes.append((html, text))

    def get_text(self) -> str:
        from punctfix.infrastructure.clipboard import ClipboardError

        if self.fail_reads:
            raise ClipboardError("Failed to read clipboard: no backend")
        return self.text

    def set_text(self, text: str) -> None:
        from punctfix.infrastructure.clipboard import ClipboardError

        if self.fail_writes:
            raise ClipboardError("Failed to set clipboard: no backend")
        self.text = text
        self.writes.append(text)


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()
