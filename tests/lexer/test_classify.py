# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the character classification predicates."""

import string

import pytest

from dfalex.lexer.classify import (
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    is_digit,
    is_keyword,
    is_letter,
    is_single_char_token,
    is_whitespace,
)

# ###############
# Letters and Digits
# ###############


class TestLetters:
    @pytest.mark.parametrize("ch", list(string.ascii_letters))
    def test_ascii_letters(self, ch: str) -> None:
        assert is_letter(ch)

    @pytest.mark.parametrize("ch", ["0", "_", "@", " ", "é", "Z1", ""])
    def test_non_letters(self, ch: str) -> None:
        assert not is_letter(ch)


class TestDigits:
    @pytest.mark.parametrize("ch", list(string.digits))
    def test_ascii_digits(self, ch: str) -> None:
        assert is_digit(ch)

    @pytest.mark.parametrize("ch", ["a", "٣", "²", "12", ""])
    def test_non_digits(self, ch: str) -> None:
        assert not is_digit(ch)


# ###############
# Whitespace
# ###############


class TestWhitespace:
    @pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r"])
    def test_recognized_whitespace(self, ch: str) -> None:
        assert is_whitespace(ch)

    @pytest.mark.parametrize("ch", ["\f", "\v", "\u00a0", "  ", ""])
    def test_other_characters_are_not_whitespace(self, ch: str) -> None:
        assert not is_whitespace(ch)


# ###############
# Operator and Delimiter Set
# ###############


class TestSingleCharTokens:
    def test_exact_membership(self) -> None:
        assert SINGLE_CHAR_TOKENS == frozenset("+-*/=><;(){}")

    @pytest.mark.parametrize("ch", sorted("+-*/=><;(){}"))
    def test_members(self, ch: str) -> None:
        assert is_single_char_token(ch)

    @pytest.mark.parametrize("ch", ["!", "&", "|", "[", "]", ",", ".", "==", ""])
    def test_non_members(self, ch: str) -> None:
        assert not is_single_char_token(ch)


class TestKeywords:
    def test_reserved_words(self) -> None:
        assert KEYWORDS == {"int", "float", "if", "else", "while", "return", "void"}

    def test_is_keyword_requires_exact_match(self) -> None:
        assert is_keyword("return")
        assert not is_keyword("returns")
        assert not is_keyword("Return")
        assert not is_keyword("")
