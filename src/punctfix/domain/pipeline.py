"""Text conversion pipeline: map → reduce → merge."""

from __future__ import annotations

from punctfix.domain.rules import has_convertible, map_char
from punctfix.domain.spacing import merge_tokens, reduce_outcomes


def convert_text(text: str) -> str | None:
    """Convert full-width punctuation in *text*.

    Returns the rewritten text, or None when *text* is empty or contains
    no ruled character.  Callers must leave their source untouched on None.
    """
    if not has_convertible(text):
        return None
    outcome = reduce_outcomes(map_char(ch) for ch in text)
    if outcome is None or not outcome.is_converted:
        return None
    return merge_tokens(outcome.tokens)
