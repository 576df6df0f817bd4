"""System clipboard access.

:class:`Clipboard` is the protocol the watcher depends on;
:class:`SystemClipboard` backs it with the platform clipboard.  Plain text
goes through pyperclip.  HTML has no pyperclip API, so on macOS it is read
from and written to the general pasteboard with a small JavaScript for
Automation script run by ``osascript``; on other platforms the clipboard
reports no HTML and the watcher works on text alone.

Backend failures surface as :class:`ClipboardError`.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import Protocol

import pyperclip

logger = logging.getLogger(__name__)

HTML_ENV_VAR = "PUNCTFIX_CLIPBOARD_HTML"
TEXT_ENV_VAR = "PUNCTFIX_CLIPBOARD_TEXT"

_READ_HTML_SCRIPT = """
ObjC.import('AppKit');
function run() {
    var html = $.NSPasteboard.generalPasteboard.stringForType($.NSPasteboardTypeHTML);
    return html.isNil() ? '' : ObjC.unwrap(html);
}
"""

# Content is passed through the environment so it never meets argv parsing.
_WRITE_RICH_SCRIPT = f"""
ObjC.import('AppKit');
function run() {{
    var env = $.NSProcessInfo.processInfo.environment;
    var pb = $.NSPasteboard.generalPasteboard;
    pb.clearContents;
    pb.setStringForType(env.objectForKey('{HTML_ENV_VAR}'), $.NSPasteboardTypeHTML);
    var text = env.objectForKey('{TEXT_ENV_VAR}');
    if (!text.isNil()) {{
        pb.setStringForType(text, $.NSPasteboardTypeString);
    }}
}}
"""


class ClipboardError(RuntimeError):
    """The clipboard could not be read or written."""


class Clipboard(Protocol):
    """Clipboard contract: plain text plus an optional HTML flavour."""

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def get_html(self) -> str | None:
        """Return the clipboard's HTML, or None when it holds none."""
        ...

    def set_rich(self, html: str, text: str | None) -> None:
        """Replace the clipboard with *html* and, if given, a plain-text *text*."""
        ...


class SystemClipboard:
    """Clipboard backed by :mod:`pyperclip` and, on macOS, the HTML pasteboard."""

    def __init__(self, *, platform: str = sys.platform) -> None:
        self._html_supported = platform == "darwin"

    def get_text(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Failed to read clipboard: {exc}") from exc

    def set_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Failed to set clipboard: {exc}") from exc
        logger.debug("Clipboard updated (%d chars)", len(text))

    def get_html(self) -> str | None:
        if not self._html_supported:
            return None
        try:
            proc = _run_osascript(_READ_HTML_SCRIPT)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"Failed to read clipboard HTML: {exc}") from exc
        # osascript terminates the returned string with a newline.
        return proc.stdout.removesuffix("\n") or None

    def set_rich(self, html: str, text: str | None) -> None:
        if not self._html_supported:
            if text is not None:
                self.set_text(text)
            return
        env = {**os.environ, HTML_ENV_VAR: html}
        env.pop(TEXT_ENV_VAR, None)
        if text is not None:
            env[TEXT_ENV_VAR] = text
        try:
            _run_osascript(_WRITE_RICH_SCRIPT, env=env)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"Failed to set clipboard HTML: {exc}") from exc
        logger.debug("Clipboard HTML updated (%d chars)", len(html))


def _run_osascript(
    script: str, *, env: dict[str, str] | None = None
) -> subprocess.CompletedProcess[str]:
    """Run a JavaScript for Automation snippet. Raises on failure."""
    return subprocess.run(
        ["osascript", "-l", "JavaScript", "-e", script],
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=True,
        env=env,
    )
