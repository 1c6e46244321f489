"""Tests for include-directive attribute parsing."""
from __future__ import annotations

import pytest

from pagesmith.core.composition.transformers.attributes import parse_attributes


class TestParseAttributes:
    """parse_attributes collects well-formed key="value" pairs and ignores the rest."""

    def test_empty_string_gives_empty_set(self) -> None:
        assert parse_attributes("") == {}

    def test_single_pair(self) -> None:
        assert parse_attributes('name="Bob"') == {"name": "Bob"}

    def test_multiple_pairs_with_extra_whitespace(self) -> None:
        attrs = parse_attributes('title="Home"     active="yes"   /')

        assert attrs == {"title": "Home", "active": "yes"}

    def test_values_are_opaque(self) -> None:
        """Values keep spaces, markup and placeholder-looking text verbatim."""
        attrs = parse_attributes('label="Sign <b>in</b> now" hint="{{ x }}"')

        assert attrs["label"] == "Sign <b>in</b> now"
        assert attrs["hint"] == "{{ x }}"

    def test_duplicate_key_last_wins(self) -> None:
        assert parse_attributes('x="1" x="2"') == {"x": "2"}

    @pytest.mark.parametrize(
        "fragment",
        [
            "bare",
            "unquoted=value",
            "single='quoted'",
            'empty=""',
            'unterminated="value',
            '="no-key"',
        ],
    )
    def test_malformed_fragments_contribute_nothing(self, fragment: str) -> None:
        assert parse_attributes(fragment) == {}

    def test_malformed_fragments_do_not_block_later_pairs(self) -> None:
        attrs = parse_attributes('junk  unquoted=1 empty="" title="Docs"')

        assert attrs == {"title": "Docs"}

    def test_unterminated_quote_swallows_nothing_after_it(self) -> None:
        """An unterminated value has no closing quote, so nothing after it can pair up."""
        assert parse_attributes('a="1" b="open') == {"a": "1"}

    def test_word_suffix_of_hyphenated_key_is_matched(self) -> None:
        """Keys are \\w+; for "data-id" only the word run touching "=" is a key."""
        assert parse_attributes('data-id="7"') == {"id": "7"}

    def test_parsing_is_deterministic(self) -> None:
        text = 'a="1" b="2" c="3"'
        assert parse_attributes(text) == parse_attributes(text)
