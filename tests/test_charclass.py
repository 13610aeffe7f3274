"""Tests for ASCII case folding and the alphabetic test."""

from __future__ import annotations

import string

import pytest

from wildglob.charclass import LOWERCASE_BIT, is_alpha, to_lower


class TestToLower:
    """Tests for to_lower()."""

    def test_lowercase_bit_is_0x20(self) -> None:
        assert LOWERCASE_BIT == 0x20

    def test_lower_stays_lower(self) -> None:
        assert to_lower("a") == "a"
        assert to_lower(ord("a")) == ord("a")

    def test_upper_becomes_lower(self) -> None:
        assert to_lower("A") == "a"
        assert to_lower(ord("Z")) == ord("z")

    def test_returns_same_kind_as_input(self) -> None:
        """A str goes in, a str comes out; an int goes in, an int comes out."""
        assert isinstance(to_lower("Q"), str)
        assert isinstance(to_lower(ord("Q")), int)

    @pytest.mark.parametrize("c", [0, 0x40, 0x7F, 0xFF, 0x10FFFF])
    def test_non_letters_do_not_raise(self, c: int) -> None:
        """Folding a non-letter is meaningless but never fails."""
        assert isinstance(to_lower(c), int)


class TestIsAlpha:
    """Tests for is_alpha()."""

    @pytest.mark.parametrize("c", list(string.ascii_letters))
    def test_ascii_letters(self, c: str) -> None:
        assert is_alpha(c) is True
        assert is_alpha(ord(c)) is True

    @pytest.mark.parametrize("c", ["0", "9", "@", "[", "`", "{", ".", "*", "?", " ", "_"])
    def test_non_letters(self, c: str) -> None:
        assert is_alpha(c) is False

    def test_case_bit_neighbours_of_letters_are_not_alpha(self) -> None:
        """'@' and '[' fold onto '`' and '{', which sit just outside a..z."""
        assert is_alpha(0x40) is False
        assert is_alpha(0x5B) is False

    def test_every_byte(self) -> None:
        letters = {ord(c) for c in string.ascii_letters}
        for c in range(128):
            assert is_alpha(c) is (c in letters)
