"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    EOF = auto()
    IDENTIFIER = auto()

    # Literals (only NUMBER and ARRAY are produced by the lexer)
    BOOLEAN = auto()
    CHARACTER = auto()
    STRING = auto()
    NUMBER = auto()  # integer literal, value is int
    DECIMAL = auto()
    ARRAY = auto()  # []

    # Reserved words
    AND = auto()
    BREAK = auto()
    CONTINUE = auto()
    ELSE = auto()
    ELSIF = auto()
    EXIT = auto()
    FALSE = auto()
    FOR = auto()
    FUNC = auto()
    IF = auto()
    IN = auto()
    OR = auto()
    PRINT = auto()
    PRINTLN = auto()
    RANGE = auto()
    RETURN = auto()
    TRUE = auto()
    VOID = auto()
    WHILE = auto()

    # Relational and equality operators
    ASSIGN = auto()  # =
    EQ = auto()  # ==
    GE = auto()  # >=
    GT = auto()  # >
    LE = auto()  # <=
    LT = auto()  # <
    NE = auto()  # !=
    NOT = auto()  # !

    # Arithmetic operators
    MINUS = auto()
    PLUS = auto()
    DIV = auto()
    MUL = auto()
    MOD = auto()

    # Punctuation
    DOT = auto()
    LBRACK = auto()
    RBRACK = auto()
    COMMA = auto()
    LPAR = auto()
    RPAR = auto()
    LCURL = auto()
    RCURL = auto()
    ARROW = auto()  # =>
    AT = auto()


_TOKEN_NAMES: dict[TokenType, str] = {
    TokenType.EOF: "end-of-file",
    TokenType.IDENTIFIER: "identifier",
    TokenType.BOOLEAN: "boolean",
    TokenType.CHARACTER: "character",
    TokenType.STRING: "string",
    TokenType.NUMBER: "number",
    TokenType.DECIMAL: "decimal",
    TokenType.ARRAY: "array",
    TokenType.ASSIGN: "'='",
    TokenType.EQ: "'=='",
    TokenType.GE: "'>='",
    TokenType.GT: "'>'",
    TokenType.LE: "'<='",
    TokenType.LT: "'<'",
    TokenType.NE: "'!='",
    TokenType.NOT: "'!'",
    TokenType.MINUS: "'-'",
    TokenType.PLUS: "'+'",
    TokenType.DIV: "'/'",
    TokenType.MUL: "'*'",
    TokenType.MOD: "'%'",
    TokenType.DOT: "'.'",
    TokenType.LBRACK: "'['",
    TokenType.RBRACK: "']'",
    TokenType.COMMA: "','",
    TokenType.LPAR: "'('",
    TokenType.RPAR: "')'",
    TokenType.LCURL: "'{'",
    TokenType.RCURL: "'}'",
    TokenType.ARROW: "'=>'",
    TokenType.AT: "'@'",
}


def token_name(tt: TokenType) -> str:
    """Return the name of a token type as shown in diagnostics.

    Token classes read as words ("identifier", "number"); fixed tokens read
    as their quoted spelling ("'if'", "'>='").
    """
    name = _TOKEN_NAMES.get(tt)
    if name is None:
        # Reserved words are spelled as their lowercase member name
        name = f"'{tt.name.lower()}'"
    return name


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token.

    ``value`` is the spelling for identifiers and reserved words, the integer
    for numbers, and None for operators and punctuation. ``lexeme`` is the
    source text the token was scanned from.
    """

    type: TokenType
    value: str | int | None
    lexeme: str
    span: Span


_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_SPACE = frozenset(" \t\n\r\v\f")


def is_word_start(ch: str) -> bool:
    """Return True if ch may begin an identifier."""
    return ch in _LETTERS or ch == "_"


def is_word_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return ch in _LETTERS or ch in _DIGITS or ch == "_"


def is_digit(ch: str) -> bool:
    return ch in _DIGITS


def is_space(ch: str) -> bool:
    return ch in _SPACE


def is_newline(ch: str) -> bool:
    return ch == "\n" or ch == "\r"
