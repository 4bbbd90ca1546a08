# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Table and JSON rendering of tokenizer results."""

from pydantic import BaseModel, ConfigDict, Field

from dfalex.lexer.tokenizer import Token, TokenKind

# ###############
# Public Interface
# ###############

KIND_COLUMN_WIDTH = 24


class TokenRecord(BaseModel):
    """Serializable view of a single token."""

    model_config = ConfigDict(extra="forbid")

    kind: str
    text: str
    line: int
    column: int


class TokenReport(BaseModel):
    """Serializable result of tokenizing one source."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source: str
    tokens: list[TokenRecord] = Field(default_factory=list)
    error_count: int = Field(alias="error-count", default=0)


def build_report(source_label: str, tokens: list[Token]) -> TokenReport:
    """Build a serializable report from a token sequence.

    Args:
        source_label: Human-readable name of the tokenized source (e.g. its path).
        tokens: Tokens returned by the tokenizer.

    Returns:
        A TokenReport listing every token and the number of ERROR tokens.
    """
    return TokenReport(
        source=source_label,
        tokens=[
            TokenRecord(kind=tok.kind.value, text=tok.text, line=tok.line, column=tok.column)
            for tok in tokens
        ],
        error_count=sum(1 for tok in tokens if tok.kind is TokenKind.ERROR),
    )


def render_json(report: TokenReport) -> str:
    """Render a report as indented JSON."""
    return report.model_dump_json(by_alias=True, indent=2)


def render_table(tokens: list[Token]) -> str:
    """Render tokens as a two-column table: kind label, then lexeme."""
    lines = [
        f"{'Type':<{KIND_COLUMN_WIDTH}}Value",
        "-" * (KIND_COLUMN_WIDTH + 10),
    ]
    if not tokens:
        lines.append("(no tokens)")
    for tok in tokens:
        lines.append(f"{tok.kind.value:<{KIND_COLUMN_WIDTH}}{tok.text}")
    return "\n".join(lines)


def render_source_echo(source_label: str, source: str) -> str:
    """Frame the raw source text with a banner naming where it was read from."""
    return f"--- Source Code Read from {source_label} ---\n{source}\n{_RULE}"


# ################
# Implementation
# ################

_RULE = "-" * 19
