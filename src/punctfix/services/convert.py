"""ConvertService — one-shot conversion of text, markup, and files."""

from __future__ import annotations

import logging
from pathlib import Path

from punctfix.domain.pipeline import convert_text
from punctfix.services.base import BaseService
from punctfix.services.markup import MarkupParseError, rewrite_markup
from punctfix.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class ConvertService(BaseService):
    """Converts full-width punctuation in plain text or HTML."""

    def convert_text(self, text: str) -> ServiceResult:
        converted = convert_text(text)
        if converted is None:
            logger.debug("No full-width punctuation in text input")
            return ServiceResult.content("convert_text", text, changed=False)
        return ServiceResult.content("convert_text", converted, changed=True)

    def convert_html(self, markup: bytes | str) -> ServiceResult:
        op = "convert_html"
        try:
            converted = rewrite_markup(markup)
        except MarkupParseError as exc:
            return ServiceResult.failure(op, ErrorCode.PARSE_ERROR, str(exc))

        if converted is None:
            original = markup.decode("utf-8") if isinstance(markup, bytes) else markup
            return ServiceResult.content(op, original, changed=False)
        return ServiceResult.content(op, converted, changed=True)

    def is_html_path(self, path: Path) -> bool:
        """Whether *path* looks like an HTML document by its suffix."""
        suffixes = {s.lower() for s in self._settings.convert.html_suffixes}
        return path.suffix.lower() in suffixes

    def convert_file(
        self,
        path: Path,
        *,
        html: bool | None = None,
        in_place: bool = False,
    ) -> ServiceResult:
        """Convert the contents of *path*.

        Args:
            path: File to read.
            html: Force markup (True) or plain-text (False) handling;
                None picks by file suffix.
            in_place: Write the converted content back when it changed.
        """
        op = "convert_file"
        if not path.is_file():
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"No such file: {path}", path=str(path)
            )

        as_html = self.is_html_path(path) if html is None else html
        try:
            raw = path.read_bytes()
        except OSError as exc:
            return ServiceResult.failure(op, ErrorCode.IO_ERROR, f"Failed to read {path}: {exc}")

        if as_html:
            inner = self.convert_html(raw)
        else:
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                return ServiceResult.failure(
                    op, ErrorCode.PARSE_ERROR, f"{path} is not valid UTF-8: {exc}"
                )
            inner = self.convert_text(text)

        if not inner.ok:
            return inner.model_copy(update={"op": op})

        data = {**inner.data, "path": str(path), "format": "html" if as_html else "text"}
        warnings: list[str] = []
        if in_place and inner.changed:
            try:
                path.write_text(data["text"], encoding="utf-8")
            except OSError as exc:
                return ServiceResult.failure(
                    op, ErrorCode.IO_ERROR, f"Failed to write {path}: {exc}"
                )
            data["written"] = True
            logger.info("Rewrote %s", path)
        elif in_place:
            warnings.append(f"{path} has no full-width punctuation; left untouched")

        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
