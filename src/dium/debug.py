"""Token dumps for --debug and the table/text output formats."""

from __future__ import annotations

import sys
from typing import TextIO

from dium.keywords import is_reserved
from dium.tokens import Token, TokenType, token_name


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one ``line:col  KIND  lexeme`` row per token to *file*."""
    width = max((len(t.type.name) for t in tokens), default=0)
    for tok in tokens:
        where = f"{tok.span.start.line}:{tok.span.start.column}"
        file.write(f"{where:<8} {tok.type.name:<{width}}  {tok.lexeme!r}\n")


def describe(tok: Token) -> str:
    """Short display form: spelling, [reserved], number value, or token name."""
    if tok.type == TokenType.IDENTIFIER:
        return str(tok.value)
    if isinstance(tok.value, str) and is_reserved(tok.value):
        return f"[{tok.value}]"
    if tok.type == TokenType.NUMBER:
        return str(tok.value)
    return token_name(tok.type)


def format_line(tokens: list[Token]) -> str:
    """All tokens before EOF on one space-separated line."""
    return " ".join(describe(t) for t in tokens if t.type != TokenType.EOF)
