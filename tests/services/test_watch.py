"""Tests for ClipboardWatcher."""

from __future__ import annotations

from pathlib import Path

from punctfix.config.settings import PunctfixSettings
from punctfix.services.result import ServiceResult
from punctfix.services.watch import ClipboardWatcher
from tests.conftest import FakeClipboard


def _watcher(
    settings: PunctfixSettings, clipboard: FakeClipboard, sleeps: list[float] | None = None
) -> ClipboardWatcher:
    record = sleeps if sleeps is not None else []
    return ClipboardWatcher(settings, clipboard, sleep=record.append)


class TestPollOnce:
    def test_converts_and_writes_back(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.text = "你好，世界！"
        result = _watcher(settings, clipboard).poll_once()
        assert result.ok is True
        assert result.op == "watch"
        assert result.data["changed"] is True
        assert result.data["text"] == "你好, 世界!"
        assert clipboard.text == "你好, 世界!"
        assert clipboard.writes == ["你好, 世界!"]

    def test_same_content_is_skipped(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.text = "你好，世界！"
        watcher = _watcher(settings, clipboard)
        watcher.poll_once()
        result = watcher.poll_once()
        assert result.data == {"changed": False, "reason": "unchanged"}
        assert len(clipboard.writes) == 1

    def test_no_punctuation_is_not_written(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.text = "Hello, world"
        watcher = _watcher(settings, clipboard)
        result = watcher.poll_once()
        assert result.data == {"changed": False, "reason": "no_punctuation"}
        assert clipboard.writes == []
        assert watcher.last_text == "Hello, world"

    def test_new_content_after_conversion(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.text = "一！"
        watcher = _watcher(settings, clipboard)
        watcher.poll_once()
        clipboard.text = "二？"
        result = watcher.poll_once()
        assert result.data["text"] == "二?"
        assert clipboard.writes == ["一!", "二?"]

    def test_read_failure(self, settings: PunctfixSettings, clipboard: FakeClipboard) -> None:
        clipboard.fail_reads = True
        result = _watcher(settings, clipboard).poll_once()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "CLIPBOARD_ERROR"

    def test_write_failure_is_not_retried(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.text = "你好，世界！"
        clipboard.fail_writes = True
        watcher = _watcher(settings, clipboard)
        result = watcher.poll_once()
        assert result.ok is False
        assert watcher.last_text == "你好，世界！"
        assert watcher.poll_once().data["reason"] == "unchanged"


class TestPollHtml:
    def test_html_and_text_converted_together(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.html = "<p>你好，<b>世界</b>！</p>"
        clipboard.text = "你好，世界！"
        watcher = _watcher(settings, clipboard)
        result = watcher.poll_once()
        assert result.ok is True
        assert result.data["changed"] is True
        assert result.data["format"] == "html"
        assert result.data["text"] == "你好, 世界!"
        [(html, text)] = clipboard.rich_writes
        assert "<p>你好,<b>世界</b>!</p>" in html
        assert text == "你好, 世界!"
        assert clipboard.writes == []
        assert watcher.last_html == html
        assert watcher.last_text == "你好, 世界!"

    def test_converted_html_is_not_reconverted(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.html = "<p>好！</p>"
        clipboard.text = "好！"
        watcher = _watcher(settings, clipboard)
        watcher.poll_once()
        result = watcher.poll_once()
        assert result.data == {"changed": False, "reason": "unchanged"}
        assert len(clipboard.rich_writes) == 1

    def test_no_punctuation_in_either_flavour(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.html = "<p>plain</p>"
        clipboard.text = "plain"
        watcher = _watcher(settings, clipboard)
        result = watcher.poll_once()
        assert result.data == {"changed": False, "reason": "no_punctuation"}
        assert clipboard.rich_writes == []
        assert watcher.last_html == "<p>plain</p>"
        assert watcher.poll_once().data["reason"] == "unchanged"

    def test_only_text_converted_keeps_html(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.html = "<p>plain</p>"
        clipboard.text = "好！"
        _watcher(settings, clipboard).poll_once()
        assert clipboard.rich_writes == [("<p>plain</p>", "好!")]

    def test_unreadable_text_flavour(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.html = "<p>好！</p>"
        clipboard.fail_reads = True
        result = _watcher(settings, clipboard).poll_once()
        assert result.ok is True
        assert "text" not in result.data
        [(html, text)] = clipboard.rich_writes
        assert "<p>好!</p>" in html
        assert text is None

    def test_html_read_failure_falls_back_to_text(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.fail_html_reads = True
        clipboard.text = "好！"
        result = _watcher(settings, clipboard).poll_once()
        assert result.data["text"] == "好!"
        assert clipboard.writes == ["好!"]
        assert clipboard.rich_writes == []

    def test_write_failure_is_not_retried(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.html = "<p>好！</p>"
        clipboard.text = "好！"
        clipboard.fail_writes = True
        watcher = _watcher(settings, clipboard)
        result = watcher.poll_once()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "CLIPBOARD_ERROR"
        assert watcher.last_html == "<p>好！</p>"
        assert watcher.poll_once().data["reason"] == "unchanged"


class TestRun:
    def test_bounded_loop_sleeps_between_cycles(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.text = "好！"
        sleeps: list[float] = []
        reported: list[ServiceResult] = []
        count = _watcher(settings, clipboard, sleeps).run(reported.append, max_cycles=3)
        assert count == 1
        assert sleeps == [0.5, 0.5]
        assert [r.data["text"] for r in reported] == ["好!"]

    def test_picks_up_changes_between_polls(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.text = "一！"
        pending = ["二？", "三。"]

        def sleep(_seconds: float) -> None:
            if pending:
                clipboard.text = pending.pop(0)

        watcher = ClipboardWatcher(settings, clipboard, sleep=sleep)
        reported: list[ServiceResult] = []
        assert watcher.run(reported.append, max_cycles=4) == 3
        assert clipboard.writes == ["一!", "二?", "三."]

    def test_failures_do_not_stop_the_loop(
        self, settings: PunctfixSettings, clipboard: FakeClipboard
    ) -> None:
        clipboard.fail_reads = True
        reported: list[ServiceResult] = []
        assert _watcher(settings, clipboard).run(reported.append, max_cycles=3) == 0
        assert reported == []

    def test_interval_from_config(self, tmp_path: Path, clipboard: FakeClipboard) -> None:
        (tmp_path / "punctfix.toml").write_text("[watch]\ninterval = 2.0\n")
        settings = PunctfixSettings.from_cli(start=tmp_path)
        sleeps: list[float] = []
        _watcher(settings, clipboard, sleeps).run(lambda _r: None, max_cycles=2)
        assert sleeps == [2.0]
