"""ClipboardWatcher — poll the clipboard and rewrite punctuation in place.

Each poll is one conversion cycle: read the clipboard, skip content that
was already seen, convert, and write back only when something changed.
When the clipboard carries HTML, the HTML and its plain-text flavour are
converted together and written back as one rich clipboard entry, so
formatting survives.  Failures are local to the cycle; the loop keeps
polling.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from punctfix.domain.pipeline import convert_text
from punctfix.infrastructure.clipboard import ClipboardError
from punctfix.services.base import BaseService
from punctfix.services.markup import rewrite_markup
from punctfix.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from punctfix.config.settings import PunctfixSettings
    from punctfix.infrastructure.clipboard import Clipboard

logger = logging.getLogger(__name__)

OP = "watch"


def _clipboard_error(exc: ClipboardError) -> ServiceResult:
    return ServiceResult.failure(OP, ErrorCode.CLIPBOARD_ERROR, str(exc))


class ClipboardWatcher(BaseService):
    """Watches a :class:`Clipboard` for new text or HTML to convert.

    Usage::

        watcher = ClipboardWatcher(settings, SystemClipboard())
        watcher.run(report=print_result)
    """

    def __init__(
        self,
        settings: PunctfixSettings,
        clipboard: Clipboard,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(settings)
        self._clipboard = clipboard
        self._sleep = sleep
        self._last_text: str | None = None
        self._last_html: str | None = None

    @property
    def last_text(self) -> str | None:
        """The most recent clipboard text this watcher has handled."""
        return self._last_text

    @property
    def last_html(self) -> str | None:
        """The most recent clipboard HTML this watcher has handled."""
        return self._last_html

    def poll_once(self) -> ServiceResult:
        """Run a single conversion cycle."""
        try:
            html = self._clipboard.get_html()
        except ClipboardError as exc:
            logger.debug("Clipboard HTML unavailable, using text: %s", exc)
            html = None
        if html is not None:
            return self._poll_html(html)
        return self._poll_text()

    def _poll_text(self) -> ServiceResult:
        try:
            text = self._clipboard.get_text()
        except ClipboardError as exc:
            return _clipboard_error(exc)

        if text == self._last_text:
            return ServiceResult.skipped(OP, "unchanged")

        logger.debug("Clipboard changed (%d chars)", len(text))
        self._last_text = text

        converted = convert_text(text)
        if converted is None:
            logger.debug("No full-width punctuation")
            return ServiceResult.skipped(OP, "no_punctuation")

        try:
            self._clipboard.set_text(converted)
        except ClipboardError as exc:
            return _clipboard_error(exc)

        self._last_text = converted
        logger.info("Clipboard text converted")
        return ServiceResult.content(OP, converted, changed=True)

    def _poll_html(self, html: str) -> ServiceResult:
        if html == self._last_html:
            return ServiceResult.skipped(OP, "unchanged")

        logger.debug("Clipboard HTML changed (%d chars)", len(html))
        self._last_html = html

        try:
            text: str | None = self._clipboard.get_text()
        except ClipboardError as exc:
            logger.debug("No plain-text flavour alongside HTML: %s", exc)
            text = None

        converted_text = convert_text(text) if text is not None else None
        converted_html = rewrite_markup(html)
        if converted_text is None and converted_html is None:
            logger.debug("No full-width punctuation")
            return ServiceResult.skipped(OP, "no_punctuation")

        new_html = converted_html if converted_html is not None else html
        new_text = converted_text if converted_text is not None else text
        try:
            self._clipboard.set_rich(new_html, new_text)
        except ClipboardError as exc:
            return _clipboard_error(exc)

        self._last_html = new_html
        self._last_text = new_text
        logger.info(
            "Clipboard HTML converted (html=%s, text=%s)",
            converted_html is not None,
            converted_text is not None,
        )
        if new_text is None:
            data = {"changed": True, "format": "html", "html": new_html, "length": len(new_html)}
            return ServiceResult(ok=True, op=OP, data=data)
        return ServiceResult.content(OP, new_text, changed=True, format="html", html=new_html)

    def run(
        self,
        report: Callable[[ServiceResult], None],
        *,
        max_cycles: int | None = None,
    ) -> int:
        """Poll until interrupted (or *max_cycles* polls have run).

        *report* is called for every cycle that rewrote the clipboard.
        Returns the number of conversions performed.
        """
        interval = self._settings.watch.interval
        cycles = 0
        conversions = 0
        while max_cycles is None or cycles < max_cycles:
            if cycles:
                self._sleep(interval)
            cycles += 1
            result = self.poll_once()
            if not result.ok:
                msg = result.error.message if result.error else "unknown error"
                logger.warning("Clipboard cycle failed: %s", msg)
                continue
            if result.changed:
                conversions += 1
                report(result)
        return conversions
