"""Tests for the full-width punctuation rule table."""

import pytest

from punctfix.domain.rules import CONVERSION_RULES, has_convertible, map_char
from punctfix.domain.types import MARKER, Literal, OutcomeKind, SpacingMarker

M = MARKER


class TestConversionRules:
    def test_sixteen_rules(self) -> None:
        assert len(CONVERSION_RULES) == 16

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            CONVERSION_RULES["．"] = (Literal("."),)  # type: ignore[index]

    @pytest.mark.parametrize("source", list(CONVERSION_RULES))
    def test_each_rule_has_one_ascii_literal(self, source: str) -> None:
        literals = [t for t in CONVERSION_RULES[source] if isinstance(t, Literal)]
        assert len(literals) == 1
        assert literals[0].text.isascii()

    @pytest.mark.parametrize("source", list(CONVERSION_RULES))
    def test_each_rule_is_flanked_by_markers(self, source: str) -> None:
        tokens = CONVERSION_RULES[source]
        assert isinstance(tokens[0], SpacingMarker)
        assert isinstance(tokens[-1], SpacingMarker)

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("，", (M, M, Literal(","), M)),
            ("。", (M, M, Literal("."), M)),
            ("“", (M, Literal('"'), M, M)),
            ("”", (M, M, Literal('"'), M)),
            ("（", (M, Literal("("), M, M)),
            ("…", (M, M, Literal("..."), M, M)),
            ("《", (M, Literal("<"), M, M)),
            ("》", (M, M, Literal(">"), M)),
            ("、", (M, M, Literal(","), M)),
        ],
    )
    def test_templates(self, source: str, expected: tuple[object, ...]) -> None:
        assert CONVERSION_RULES[source] == expected


class TestMapChar:
    def test_ruled_character_is_converted(self) -> None:
        outcome = map_char("！")
        assert outcome.kind is OutcomeKind.CONVERTED
        assert Literal("!") in outcome.tokens

    @pytest.mark.parametrize("ch", ["a", "你", " ", "\n", ",", "　", "\U0001f600", "\0"])
    def test_unruled_character_passes_through(self, ch: str) -> None:
        outcome = map_char(ch)
        assert outcome.kind is OutcomeKind.RAW
        assert outcome.tokens == (Literal(ch),)


class TestHasConvertible:
    def test_detects_punctuation(self) -> None:
        assert has_convertible("你好，世界")

    def test_plain_ascii(self) -> None:
        assert not has_convertible("Hello, world")

    def test_empty(self) -> None:
        assert not has_convertible("")
