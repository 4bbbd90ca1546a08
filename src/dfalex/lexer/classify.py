# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character classification rules used by the DFA transitions.

Every predicate is pure and total: it accepts any string and returns ``False``
unless the argument is exactly one character of the requested class.
"""

# ###############
# Public Interface
# ###############

KEYWORDS: frozenset[str] = frozenset({"int", "float", "if", "else", "while", "return", "void"})

SINGLE_CHAR_TOKENS: frozenset[str] = frozenset("+-*/=><;(){}")

# Lead characters that may combine with a following '=' into a relational operator.
RELATIONAL_LEADS: frozenset[str] = frozenset("=<>")

ARITHMETIC_OPERATORS: frozenset[str] = frozenset("+-*")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r")


def is_letter(c: str) -> bool:
    """Return True for a single ASCII letter."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def is_digit(c: str) -> bool:
    """Return True for a single ASCII decimal digit."""
    return len(c) == 1 and "0" <= c <= "9"


def is_whitespace(c: str) -> bool:
    """Return True for space, tab, newline or carriage return."""
    return c in WHITESPACE


def is_single_char_token(c: str) -> bool:
    """Return True for a character from the operator/delimiter set."""
    return c in SINGLE_CHAR_TOKENS


def is_keyword(lexeme: str) -> bool:
    return lexeme in KEYWORDS
