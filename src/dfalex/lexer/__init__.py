# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character classification and the DFA tokenizer."""

from dfalex.lexer.tokenizer import State, Token, Tokenizer, TokenKind, error_tokens, tokenize

__all__ = [
    "State",
    "Token",
    "TokenKind",
    "Tokenizer",
    "error_tokens",
    "tokenize",
]
