"""Lexical front end for the Dium language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from dium.tokens import Token

__version__ = "0.1.0"


def lex(path: Path | str, name: str | None = None) -> list[Token]:
    """Read a Dium source file and return its tokens, EOF last."""
    from dium.lexer import tokenize_file

    return tokenize_file(path, name)
