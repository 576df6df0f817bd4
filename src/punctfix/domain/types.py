"""Conversion outcome and token types.

A conversion produces a stream of tokens: literal text, or a spacing
marker denoting a site where a single space *may* be inserted.  Markers
are objects, never characters, so no input text can collide with them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal text emitted verbatim by the merge step."""

    text: str


class SpacingMarker:
    """Optional word-boundary site; resolved to one space or nothing."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MARKER"


MARKER: Final = SpacingMarker()

Token = Literal | SpacingMarker


class OutcomeKind(StrEnum):
    """Whether any substitution happened in the covered input."""

    CONVERTED = "converted"
    RAW = "raw"


@dataclass(frozen=True, slots=True)
class ConversionOutcome:
    """Tagged token content for a character or a whole input.

    Concatenation is closed over the two kinds: anything combined with a
    ``CONVERTED`` outcome is ``CONVERTED``; only ``RAW + RAW`` stays ``RAW``.
    """

    kind: OutcomeKind
    tokens: tuple[Token, ...]

    @classmethod
    def raw(cls, text: str) -> ConversionOutcome:
        return cls(OutcomeKind.RAW, (Literal(text),))

    @classmethod
    def converted(cls, tokens: tuple[Token, ...]) -> ConversionOutcome:
        return cls(OutcomeKind.CONVERTED, tokens)

    @property
    def is_converted(self) -> bool:
        return self.kind is OutcomeKind.CONVERTED

    def __add__(self, other: ConversionOutcome) -> ConversionOutcome:
        if not isinstance(other, ConversionOutcome):
            return NotImplemented
        kind = (
            OutcomeKind.CONVERTED
            if self.is_converted or other.is_converted
            else OutcomeKind.RAW
        )
        return ConversionOutcome(kind, self.tokens + other.tokens)
