"""Reserved-word table, sorted by spelling and searched with bisect."""

from __future__ import annotations

from bisect import bisect_left
from typing import NamedTuple

from dium.tokens import TokenType


class ReservedWord(NamedTuple):
    spelling: str
    type: TokenType


# Must stay sorted by spelling
RESERVED_WORDS: tuple[ReservedWord, ...] = (
    ReservedWord("and", TokenType.AND),
    ReservedWord("break", TokenType.BREAK),
    ReservedWord("continue", TokenType.CONTINUE),
    ReservedWord("else", TokenType.ELSE),
    ReservedWord("elsif", TokenType.ELSIF),
    ReservedWord("exit", TokenType.EXIT),
    ReservedWord("false", TokenType.FALSE),
    ReservedWord("for", TokenType.FOR),
    ReservedWord("func", TokenType.FUNC),
    ReservedWord("if", TokenType.IF),
    ReservedWord("in", TokenType.IN),
    ReservedWord("or", TokenType.OR),
    ReservedWord("print", TokenType.PRINT),
    ReservedWord("println", TokenType.PRINTLN),
    ReservedWord("range", TokenType.RANGE),
    ReservedWord("return", TokenType.RETURN),
    ReservedWord("true", TokenType.TRUE),
    ReservedWord("void", TokenType.VOID),
    ReservedWord("while", TokenType.WHILE),
)

_SPELLINGS: tuple[str, ...] = tuple(w.spelling for w in RESERVED_WORDS)

if list(_SPELLINGS) != sorted(_SPELLINGS):
    raise RuntimeError("reserved-word table is not sorted by spelling")


def lookup(spelling: str) -> TokenType | None:
    """Return the reserved token type for spelling, or None for identifiers."""
    idx = bisect_left(_SPELLINGS, spelling)
    if idx < len(_SPELLINGS) and _SPELLINGS[idx] == spelling:
        return RESERVED_WORDS[idx].type
    return None


def is_reserved(spelling: str) -> bool:
    return lookup(spelling) is not None
