"""Error types, diagnostics, and the reporter used by the lexer."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NoReturn

from dium.tokens import Position


class Severity(Enum):
    ERROR = "Error"
    WARNING = "Warning"


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _header(filename: str, position: Position, severity: Severity, message: str) -> str:
    return f"{filename}: {position.line}:{position.column} {severity.value}: {message}"


def _context(source: str, position: Position) -> str:
    """Render the source line at position with a caret under the column."""
    # Same line breaks as PositionTracker: CRLF, lone CR, LF
    lines = _LINE_BREAK.split(source)
    line_idx = position.line - 1
    col = position.column

    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx]
    else:
        source_line = ""

    line_num = str(position.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"
    pad = " " * (col - 1)

    return f"{blank_gutter}\n{line_gutter} {source_line}\n{blank_gutter} {pad}^"


class DiumError(Exception):
    """Base class for all errors raised by the Dium front end."""


class FileOpenError(DiumError):
    """Raised when a source file cannot be opened for reading."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(self.format())

    def format(self) -> str:
        return f"{self.path}: Error: cannot open source file ({self.reason})"


class LexError(DiumError):
    """Raised on the first lexing error, with position and source context."""

    def __init__(
        self, message: str, position: Position, source: str, filename: str = "input.dm"
    ) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.filename = filename
        super().__init__(self.summary())

    def summary(self, filename: str | None = None) -> str:
        """The one-line ``name: line:col Error: message`` form."""
        return _header(filename or self.filename, self.position, Severity.ERROR, self.message)

    def format(self, filename: str | None = None) -> str:
        return f"{self.summary(filename)}\n{_context(self.source, self.position)}"


class UnterminatedComment(LexError):
    """End of input inside a block comment; positioned at the opening marker."""


class IllegalCharacter(LexError):
    """A character that starts no token."""


class IdentifierTooLong(LexError):
    """An identifier longer than the configured limit; positioned at its start."""


class NumericOverflow(LexError):
    """An integer literal above the configured maximum; positioned at its first digit."""


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A position-tagged message, as published to the CLI or the language server."""

    severity: Severity
    message: str
    position: Position
    filename: str

    def format(self) -> str:
        return _header(self.filename, self.position, self.severity, self.message)

    @classmethod
    def from_error(cls, exc: LexError) -> Diagnostic:
        return cls(Severity.ERROR, exc.message, exc.position, exc.filename)


class Reporter:
    """Formats diagnostics for one source.

    Errors are raised as the given LexError subclass. Warnings are handed to
    ``on_warning`` and scanning carries on.
    """

    def __init__(
        self,
        filename: str,
        source: str,
        on_warning: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        self.filename = filename
        self.source = source
        self._on_warning = on_warning

    def error(self, exc_type: type[LexError], position: Position, fmt: str, *args: object) -> NoReturn:
        message = fmt % args if args else fmt
        raise exc_type(message, position, self.source, self.filename)

    def warning(self, position: Position, fmt: str, *args: object) -> Diagnostic:
        message = fmt % args if args else fmt
        diag = Diagnostic(Severity.WARNING, message, position, self.filename)
        if self._on_warning is not None:
            self._on_warning(diag)
        return diag
