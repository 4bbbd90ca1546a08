# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""DFA-based tokenizer.

Converts raw source text into a sequence of classified tokens. The automaton is
modelled explicitly: a :class:`Tokenizer` holds a :class:`State` and a scan
cursor, and each call to :meth:`Tokenizer.step` performs exactly one transition.
Invalid characters never abort a run; they are emitted as ``ERROR`` tokens.
"""

import enum
from dataclasses import dataclass

from dfalex.lexer.classify import (
    ARITHMETIC_OPERATORS,
    RELATIONAL_LEADS,
    is_digit,
    is_keyword,
    is_letter,
    is_single_char_token,
    is_whitespace,
)

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """The closed set of token categories."""

    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    INTEGER = "INTEGER"
    RELATIONAL_OPERATOR = "RELATIONAL_OPERATOR"
    ASSIGNMENT_OPERATOR = "ASSIGNMENT_OPERATOR"
    ARITHMETIC_OPERATOR = "ARITHMETIC_OPERATOR"
    DELIMITER = "DELIMITER"
    ERROR = "ERROR"


class State(enum.Enum):
    """States of the tokenizer automaton."""

    START = "start"
    IN_IDENTIFIER = "in_identifier"
    IN_INTEGER = "in_integer"
    IN_OPERATOR_LOOKAHEAD = "in_operator_lookahead"


@dataclass(frozen=True)
class Token:
    """A classified lexeme with its source location.

    Attributes:
        kind: The token category.
        text: The exact source substring (never empty).
        position: 0-based offset of the first character.
        line: 1-based line number of the first character.
        column: 1-based column number of the first character.
    """

    kind: TokenKind
    text: str
    position: int
    line: int
    column: int

    @property
    def end(self) -> int:
        """Offset one past the last character of the lexeme."""
        return self.position + len(self.text)


class Tokenizer:
    """Step-wise simulation of the tokenizer DFA.

    A single instance can be reused; :meth:`run` resets all scan state first.
    """

    def __init__(self) -> None:
        self.reset("")

    # ------------------------------------------------------------------
    # Driving the automaton
    # ------------------------------------------------------------------

    def reset(self, source: str) -> None:
        """Load *source* and return the automaton to its start state."""
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._state = State.START
        self._lexeme_start = 0
        self._lexeme_line = 1
        self._lexeme_column = 1
        self._tokens: list[Token] = []

    def run(self, source: str) -> list[Token]:
        """Tokenize *source* completely and return the emitted tokens."""
        self.reset(source)
        while not self.done:
            self.step()
        return list(self._tokens)

    def step(self) -> Token | None:
        """Perform one transition and return the token it emitted, if any.

        At most one character is consumed per step. Accepting an accumulated
        lexeme does not consume the terminating character. Calling this once
        :attr:`done` is True does nothing.
        """
        if self._state is State.START:
            return self._step_start()
        if self._state is State.IN_IDENTIFIER:
            return self._step_identifier()
        if self._state is State.IN_INTEGER:
            return self._step_integer()
        return self._step_operator_lookahead()

    @property
    def state(self) -> State:
        return self._state

    @property
    def cursor(self) -> int:
        return self._pos

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Tokens emitted so far, in source order."""
        return tuple(self._tokens)

    @property
    def done(self) -> bool:
        """True once the whole input has been consumed and accepted."""
        return self._state is State.START and self._pos >= len(self._source)

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the cursor, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update location tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _begin_lexeme(self, state: State) -> None:
        """Record the lexeme start, consume its first character and enter *state*."""
        self._lexeme_start = self._pos
        self._lexeme_line = self._line
        self._lexeme_column = self._column
        self._advance()
        self._state = state

    def _accept(self, kind: TokenKind) -> Token:
        """Emit the accumulated lexeme as *kind* and return to the start state."""
        token = Token(
            kind,
            self._source[self._lexeme_start : self._pos],
            self._lexeme_start,
            self._lexeme_line,
            self._lexeme_column,
        )
        self._tokens.append(token)
        self._state = State.START
        return token

    # ------------------------------------------------------------------
    # Transition functions
    # ------------------------------------------------------------------

    def _step_start(self) -> Token | None:
        ch = self._current()
        if ch == "":
            return None
        if is_whitespace(ch):
            self._advance()
            return None
        if is_letter(ch):
            self._begin_lexeme(State.IN_IDENTIFIER)
            return None
        if is_digit(ch):
            self._begin_lexeme(State.IN_INTEGER)
            return None
        if is_single_char_token(ch):
            self._begin_lexeme(State.IN_OPERATOR_LOOKAHEAD)
            return None
        # Unrecognized character: a one-character ERROR token, scanning continues.
        self._begin_lexeme(State.START)
        return self._accept(TokenKind.ERROR)

    def _step_identifier(self) -> Token | None:
        ch = self._current()
        if is_letter(ch) or is_digit(ch):
            self._advance()
            return None
        lexeme = self._source[self._lexeme_start : self._pos]
        return self._accept(TokenKind.KEYWORD if is_keyword(lexeme) else TokenKind.IDENTIFIER)

    def _step_integer(self) -> Token | None:
        if is_digit(self._current()):
            self._advance()
            return None
        return self._accept(TokenKind.INTEGER)

    def _step_operator_lookahead(self) -> Token:
        lead = self._source[self._lexeme_start]
        if lead in RELATIONAL_LEADS and self._current() == "=":
            self._advance()
            return self._accept(TokenKind.RELATIONAL_OPERATOR)
        if lead in ARITHMETIC_OPERATORS:
            return self._accept(TokenKind.ARITHMETIC_OPERATOR)
        if lead == "=":
            return self._accept(TokenKind.ASSIGNMENT_OPERATOR)
        return self._accept(TokenKind.DELIMITER)


def tokenize(source: str) -> list[Token]:
    """Tokenize source text into a list of tokens.

    Whitespace is skipped and never appears in the output. Characters outside
    every recognized class are returned as ``ERROR`` tokens instead of raising,
    so a single pass reports every lexical problem.

    Args:
        source: The complete program text.

    Returns:
        Tokens in source order; empty for empty or whitespace-only input.
    """
    return Tokenizer().run(source)


def error_tokens(tokens: list[Token]) -> list[Token]:
    """Return only the ``ERROR`` tokens from *tokens*, preserving order."""
    return [tok for tok in tokens if tok.kind is TokenKind.ERROR]
