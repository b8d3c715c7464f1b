"""Dium lexer: turns a character source into tokens, one per call."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from dium.errors import (
    Diagnostic,
    IdentifierTooLong,
    IllegalCharacter,
    LexError,
    NumericOverflow,
    Reporter,
    UnterminatedComment,
)
from dium.keywords import lookup
from dium.source import CharSource
from dium.tokens import (
    Position,
    Span,
    Token,
    TokenType,
    is_digit,
    is_newline,
    is_space,
    is_word_char,
    is_word_start,
)

MAX_ID_LENGTH = 32
MAX_INT = 2**31 - 1


@dataclass(frozen=True, slots=True)
class LexerOptions:
    """Limits applied while scanning."""

    max_identifier_length: int = MAX_ID_LENGTH
    max_int: int = MAX_INT


_SINGLE: dict[str, TokenType] = {
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "*": TokenType.MUL,
    "%": TokenType.MOD,
    ".": TokenType.DOT,
    "]": TokenType.RBRACK,
    ",": TokenType.COMMA,
    "(": TokenType.LPAR,
    ")": TokenType.RPAR,
    "{": TokenType.LCURL,
    "}": TokenType.RCURL,
    "@": TokenType.AT,
}

# first char -> (second char -> composite type, fallback single type)
_COMPOSITE: dict[str, tuple[dict[str, TokenType], TokenType]] = {
    "=": ({">": TokenType.ARROW, "=": TokenType.EQ}, TokenType.ASSIGN),
    ">": ({"=": TokenType.GE}, TokenType.GT),
    "<": ({"=": TokenType.LE}, TokenType.LT),
    "!": ({"=": TokenType.NE}, TokenType.NOT),
    "[": ({"]": TokenType.ARRAY}, TokenType.LBRACK),
}

_QUOTES = {'"': "string", "'": "character"}


class Lexer:
    """Tokenize a Dium source one token at a time.

    The first error is raised as a LexError subclass; after that the lexer
    raises the same error on every call instead of producing more tokens.
    """

    def __init__(
        self,
        source: CharSource,
        options: LexerOptions | None = None,
        on_warning: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        self._src = source
        self._options = options or LexerOptions()
        self._on_warning = on_warning
        self._reporter = Reporter(source.name, source.text, self._warn)
        self._failed: LexError | None = None
        self.warnings: list[Diagnostic] = []
        if not source.started:
            source.advance()

    def next_token(self) -> Token:
        """Scan and return the next token; EOF repeats once the input is done."""
        if self._failed is not None:
            raise self._failed
        try:
            return self._scan()
        except LexError as exc:
            self._failed = exc
            raise

    def tokenize(self) -> list[Token]:
        """Tokenize the rest of the source and return the token list, EOF last."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    def _warn(self, diag: Diagnostic) -> None:
        self.warnings.append(diag)
        if self._on_warning is not None:
            self._on_warning(diag)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _make(self, tt: TokenType, value: str | int | None, start: Position) -> Token:
        end = self._src.position
        lexeme = self._src.text[start.offset : end.offset]
        return Token(tt, value, lexeme, Span(start, end))

    def _fixed(self, tt: TokenType, length: int) -> Token:
        start = self._src.position
        for _ in range(length):
            self._src.advance()
        return self._make(tt, None, start)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan(self) -> Token:
        self._skip_trivia()
        src = self._src

        if src.at_end:
            pos = src.position
            return Token(TokenType.EOF, None, "", Span(pos, pos))

        ch = src.current

        if is_word_start(ch):
            return self._scan_word()

        if is_digit(ch):
            return self._scan_number()

        if ch in _COMPOSITE:
            pairs, single = _COMPOSITE[ch]
            second = pairs.get(src.peek())
            if second is not None:
                return self._fixed(second, 2)
            return self._fixed(single, 1)

        if ch == "/":
            # Comment openers were consumed by _skip_trivia
            return self._fixed(TokenType.DIV, 1)

        if ch in _SINGLE:
            return self._fixed(_SINGLE[ch], 1)

        if ch in _QUOTES:
            self._reporter.error(
                IllegalCharacter,
                src.position,
                "%s literals are not supported ('%s', ASCII #%d)",
                _QUOTES[ch],
                ch,
                ord(ch),
            )

        self._reporter.error(
            IllegalCharacter,
            src.position,
            "Illegal character '%s' (ASCII #%d) found",
            ch,
            ord(ch),
        )

    def _skip_trivia(self) -> None:
        """Skip whitespace and comments until a token starts or input ends."""
        src = self._src
        while True:
            while is_space(src.current):
                src.advance()
            if src.current == "/" and src.peek() == "/":
                self._skip_line_comment()
            elif src.current == "/" and src.peek() == "-":
                self._skip_block_comment()
            else:
                return

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        """Skip ``//`` up to, not including, the end of the line."""
        src = self._src
        while not src.at_end and not is_newline(src.current):
            src.advance()

    def _skip_block_comment(self) -> None:
        """Skip a ``/- ... -/`` comment, including any nested ones.

        Each ``/-`` pushes its position and each ``-/`` pops one, so an inner
        close only ends the inner comment. An unclosed comment is reported
        where the innermost still-open one started.
        """
        src = self._src
        openers = [src.position]
        src.advance()
        src.advance()

        while openers:
            if src.at_end:
                self._reporter.error(UnterminatedComment, openers[-1], "Comment not closed")
            if src.current == "-" and src.peek() == "/":
                src.advance()
                src.advance()
                openers.pop()
            elif src.current == "/" and src.peek() == "-":
                openers.append(src.position)
                src.advance()
                src.advance()
            else:
                src.advance()

    # ------------------------------------------------------------------
    # Words and numbers
    # ------------------------------------------------------------------

    def _scan_word(self) -> Token:
        src = self._src
        start = src.position
        chars = []
        while is_word_char(src.current):
            chars.append(src.current)
            src.advance()
        text = "".join(chars)

        limit = self._options.max_identifier_length
        if len(text) > limit:
            self._reporter.error(
                IdentifierTooLong,
                start,
                "Identifier '%s...' is longer than %d characters",
                text[:limit],
                limit,
            )

        tt = lookup(text) or TokenType.IDENTIFIER
        return self._make(tt, text, start)

    def _scan_number(self) -> Token:
        src = self._src
        start = src.position
        max_int = self._options.max_int
        value = 0

        while is_digit(src.current):
            digit = ord(src.current) - ord("0")
            if value > (max_int - digit) // 10:
                self._reporter.error(
                    NumericOverflow, start, "Number literal exceeds maximum value %d", max_int
                )
            value = value * 10 + digit
            src.advance()

        tok = self._make(TokenType.NUMBER, value, start)
        if len(tok.lexeme) > 1 and tok.lexeme[0] == "0":
            self._reporter.warning(start, "Leading zeros in number literal '%s'", tok.lexeme)
        return tok


def tokenize(
    source: str,
    filename: str = "input.dm",
    options: LexerOptions | None = None,
    on_warning: Callable[[Diagnostic], None] | None = None,
) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(CharSource(source, filename), options, on_warning).tokenize()


def tokenize_file(
    path: Path | str,
    name: str | None = None,
    options: LexerOptions | None = None,
    on_warning: Callable[[Diagnostic], None] | None = None,
) -> list[Token]:
    """Read and tokenize a source file. Raises FileOpenError if it cannot be read."""
    return Lexer(CharSource.open(path, name), options, on_warning).tokenize()
