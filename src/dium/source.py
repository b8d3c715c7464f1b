"""Character source and position tracking for the lexer."""

from __future__ import annotations

from pathlib import Path

from dium.errors import FileOpenError
from dium.tokens import Position


class PositionTracker:
    """Line and column of the character under the cursor, both 1-based."""

    def __init__(self) -> None:
        self.line = 1
        self.column = 1

    def consume(self, ch: str, following: str = "") -> None:
        """Step past ch. A CR directly followed by LF counts as one line break."""
        if ch == "\n" or (ch == "\r" and following != "\n"):
            self.line += 1
            self.column = 1
        else:
            self.column += 1


class CharSource:
    """Sequential single-character reader over a source text.

    The cursor starts before the first character; call ``advance()`` once
    before reading ``current``.
    """

    def __init__(self, text: str, name: str = "input.dm") -> None:
        self.text = text
        self.name = name
        self._pos = -1
        self._tracker = PositionTracker()

    @classmethod
    def open(cls, path: Path | str, name: str | None = None) -> CharSource:
        """Read a source file, one byte per character."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FileOpenError(path, exc.strerror or str(exc)) from exc
        return cls(data.decode("latin-1"), name or path.name)

    @property
    def started(self) -> bool:
        return self._pos >= 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self.text)

    @property
    def current(self) -> str:
        if 0 <= self._pos < len(self.text):
            return self.text[self._pos]
        return ""

    def peek(self) -> str:
        """Return the character after the current one, or "" past the end."""
        idx = self._pos + 1
        if 0 <= idx < len(self.text):
            return self.text[idx]
        return ""

    @property
    def position(self) -> Position:
        return Position(self._tracker.line, self._tracker.column, max(self._pos, 0))

    def advance(self) -> None:
        """Move to the next character. Does nothing once past the end."""
        if self.at_end:
            return
        if self._pos >= 0:
            self._tracker.consume(self.text[self._pos], self.peek())
        self._pos += 1
