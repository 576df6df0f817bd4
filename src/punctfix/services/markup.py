"""Structure-preserving punctuation rewrite for HTML documents.

The document is parsed with BeautifulSoup's html5lib tree builder, so the
tree matches what a browser builds (doctype, ``html``/``head``/``body``
synthesis).  Every text node, including ``script`` and ``style`` content,
is run through :func:`~punctfix.domain.pipeline.convert_text`
independently; text is never merged across element boundaries.  Tags,
attributes (values and source order), comments, and the doctype are never
modified.

The tree is re-serialized only when at least one text node changed, so an
untouched document is never reformatted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import NavigableString, PageElement, PreformattedString, Tag
from bs4.formatter import HTMLFormatter

from punctfix.domain.pipeline import convert_text

logger = logging.getLogger(__name__)


class SourceOrderFormatter(HTMLFormatter):
    """Minimal escaping (&, <, >), void elements without a trailing slash,
    and attributes written in the order the parser saw them."""

    def __init__(self) -> None:
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_xml,
            void_element_close_prefix=None,
        )

    def attributes(self, tag: Tag) -> Iterable[tuple[str, str | None]]:
        # HTMLFormatter sorts attributes alphabetically by default.
        return list((tag.attrs or {}).items())


HTML_FORMATTER = SourceOrderFormatter()


class MarkupParseError(ValueError):
    """The markup byte stream could not be decoded for parsing."""


def _decode(markup: bytes | str) -> str:
    if isinstance(markup, str):
        return markup
    try:
        return markup.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MarkupParseError(f"Markup is not valid UTF-8: {exc}") from exc


def _is_text(node: PageElement) -> bool:
    """True for character data; comments, doctype, and CDATA are excluded."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def rewrite_markup(markup: bytes | str) -> str | None:
    """Convert punctuation in every text node of an HTML document.

    Args:
        markup: HTML document or fragment; bytes must be UTF-8.

    Returns:
        The re-serialized document, or None when no text node changed.

    Raises:
        MarkupParseError: *markup* is bytes that are not valid UTF-8.
    """
    soup = BeautifulSoup(_decode(markup), "html5lib")

    changed = 0
    stack: list[PageElement] = [soup]
    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            # Snapshot children; replace_with() mutates the parent's list.
            stack.extend(reversed(list(node.contents)))
            continue
        if not _is_text(node):
            continue
        converted = convert_text(str(node))
        if converted is None:
            continue
        node.replace_with(type(node)(converted))
        changed += 1

    if not changed:
        return None

    logger.debug("Converted %d text node(s)", changed)
    try:
        # eventual_encoding=None keeps <meta charset> values as written.
        return soup.decode(eventual_encoding=None, formatter=HTML_FORMATTER)
    except Exception:
        # Never hand back a partially serialized document.
        logger.warning("Failed to serialize converted markup", exc_info=True)
        return None
