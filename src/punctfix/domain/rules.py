"""Full-width punctuation rules — the fixed sixteen-entry table.

Each rule maps a source character to an ordered token template.  ``M``
marks where a space is *allowed*; whether one is actually emitted is
decided later by :func:`punctfix.domain.spacing.merge_tokens` from the
surrounding content.  Closing punctuation carries two markers before the
literal (so a preceding word never gets a space) and one after; opening
punctuation mirrors that.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from punctfix.domain.types import MARKER, ConversionOutcome, Literal, Token

M = MARKER


def _rule(*parts: str | object) -> tuple[Token, ...]:
    return tuple(Literal(p) if isinstance(p, str) else M for p in parts)


CONVERSION_RULES: Final = MappingProxyType(
    {
        "》": _rule(M, M, ">", M),
        "《": _rule(M, "<", M, M),
        "：": _rule(M, M, ":", M),
        "；": _rule(M, M, ";", M),
        "“": _rule(M, '"', M, M),
        "”": _rule(M, M, '"', M),
        "！": _rule(M, M, "!", M),
        "…": _rule(M, M, "...", M, M),
        "（": _rule(M, "(", M, M),
        "）": _rule(M, M, ")", M),
        "【": _rule(M, "[", M, M),
        "】": _rule(M, M, "]", M),
        "、": _rule(M, M, ",", M),
        "。": _rule(M, M, ".", M),
        "，": _rule(M, M, ",", M),
        "？": _rule(M, M, "?", M),
    }
)


def map_char(ch: str) -> ConversionOutcome:
    """Map one character to its conversion outcome.

    Total over all code points: characters without a rule pass through
    as a ``RAW`` literal.
    """
    tokens = CONVERSION_RULES.get(ch)
    if tokens is None:
        return ConversionOutcome.raw(ch)
    return ConversionOutcome.converted(tokens)


def has_convertible(text: str) -> bool:
    """Return True if *text* contains at least one ruled character."""
    return any(ch in CONVERSION_RULES for ch in text)
