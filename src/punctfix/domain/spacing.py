"""Outcome reduction and spacing-marker resolution.

``reduce_outcomes`` folds per-character outcomes into one, coalescing
adjacent literals.  ``merge_tokens`` resolves each maximal run of markers:

- a run of two or more markers emits nothing;
- a lone marker emits one space only when the last emitted character is
  not whitespace and the next literal exists and does not start with
  whitespace.

The "last emitted is whitespace" flag starts true, so markers at the
start of the input never produce a leading space.
"""

from __future__ import annotations

from collections.abc import Iterable

from punctfix.domain.types import (
    ConversionOutcome,
    Literal,
    OutcomeKind,
    SpacingMarker,
    Token,
)


def reduce_outcomes(outcomes: Iterable[ConversionOutcome]) -> ConversionOutcome | None:
    """Left-fold *outcomes* under the concatenation law.

    Equivalent to ``functools.reduce(operator.add, outcomes)`` but linear,
    and with runs of adjacent literals joined into a single literal.
    Returns None for an empty sequence.
    """
    kind: OutcomeKind | None = None
    tokens: list[Token] = []
    pending: list[str] = []

    for outcome in outcomes:
        if kind is None or outcome.is_converted:
            kind = outcome.kind if kind is None else OutcomeKind.CONVERTED
        for token in outcome.tokens:
            if isinstance(token, Literal):
                pending.append(token.text)
                continue
            if pending:
                tokens.append(Literal("".join(pending)))
                pending.clear()
            tokens.append(token)

    if kind is None:
        return None
    if pending:
        tokens.append(Literal("".join(pending)))
    return ConversionOutcome(kind, tuple(tokens))


def merge_tokens(tokens: Iterable[Token]) -> str:
    """Resolve spacing markers into literal spaces (or nothing)."""
    out: list[str] = []
    prev_is_whitespace = True
    run = 0

    for token in tokens:
        if isinstance(token, SpacingMarker):
            run += 1
            continue
        text = token.text
        if not text:
            continue
        if run == 1 and not prev_is_whitespace and not text[0].isspace():
            out.append(" ")
        run = 0
        out.append(text)
        prev_is_whitespace = text[-1].isspace()

    return "".join(out)
