"""Tests for ASCII character class predicates."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localeid.core.charclass import (
    is_alnum,
    is_alnum_char,
    is_alpha,
    is_alpha_char,
    is_digit,
    is_digit_char,
)


class TestCharPredicates:
    """Single-character predicates."""

    @pytest.mark.parametrize("ch", ["a", "Z"])
    def test_alpha(self, ch: str) -> None:
        assert is_alpha_char(ch)
        assert is_alnum_char(ch)
        assert not is_digit_char(ch)

    def test_digit(self) -> None:
        assert is_digit_char("7")
        assert is_alnum_char("7")
        assert not is_alpha_char("7")

    @pytest.mark.parametrize("ch", ["é", "ß", "٣", "²", "-", "_", " ", "", "ab"])
    def test_rejected(self, ch: str) -> None:
        assert not is_alnum_char(ch)


class TestStringPredicates:
    """Whole-string predicates."""

    def test_empty_is_never_valid(self) -> None:
        assert not is_alpha("")
        assert not is_digit("")
        assert not is_alnum("")

    def test_trailing_newline_rejected(self) -> None:
        assert not is_alnum("abc\n")

    def test_non_ascii_digits_rejected(self) -> None:
        assert not is_digit("٤١٩")

    @given(text=st.text(alphabet="abcXYZ019", min_size=1))
    def test_ascii_alphanumerics_accepted(self, text: str) -> None:
        assert is_alnum(text)

    @given(text=st.text(min_size=1))
    def test_matches_character_predicate(self, text: str) -> None:
        assert is_alnum(text) == all(is_alnum_char(ch) for ch in text)
