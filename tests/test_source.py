"""Test the character source and position tracking."""

from pathlib import Path

import pytest

from dium.errors import FileOpenError
from dium.source import CharSource, PositionTracker


class TestPositionTracker:
    def test_starts_at_one(self):
        t = PositionTracker()
        assert (t.line, t.column) == (1, 1)

    def test_column_advances(self):
        t = PositionTracker()
        t.consume("a")
        t.consume("b")
        assert (t.line, t.column) == (1, 3)

    def test_newline_resets_column(self):
        t = PositionTracker()
        t.consume("a")
        t.consume("\n")
        assert (t.line, t.column) == (2, 1)

    def test_lone_cr_is_newline(self):
        t = PositionTracker()
        t.consume("\r", "x")
        assert (t.line, t.column) == (2, 1)

    def test_crlf_is_one_newline(self):
        t = PositionTracker()
        t.consume("\r", "\n")
        t.consume("\n")
        assert (t.line, t.column) == (2, 1)


class TestCharSource:
    def test_not_started(self):
        src = CharSource("ab")
        assert not src.started
        assert src.current == ""

    def test_advance_reads(self):
        src = CharSource("ab")
        src.advance()
        assert src.current == "a"
        assert src.peek() == "b"
        src.advance()
        assert src.current == "b"
        assert src.peek() == ""

    def test_at_end(self):
        src = CharSource("a")
        src.advance()
        assert not src.at_end
        src.advance()
        assert src.at_end
        assert src.current == ""

    def test_advance_past_end_is_idempotent(self):
        src = CharSource("a\n")
        for _ in range(10):
            src.advance()
        assert src.at_end
        pos = src.position
        src.advance()
        assert src.position == pos

    def test_empty(self):
        src = CharSource("")
        src.advance()
        assert src.at_end

    def test_position(self):
        src = CharSource("ab\ncd")
        for _ in range(4):
            src.advance()
        assert src.current == "c"
        pos = src.position
        assert (pos.line, pos.column, pos.offset) == (2, 1, 3)


class TestOpen:
    def test_open_file(self, tmp_path: Path):
        path = tmp_path / "prog.dm"
        path.write_bytes(b"x = 1\n")
        src = CharSource.open(path)
        assert src.text == "x = 1\n"
        assert src.name == "prog.dm"

    def test_custom_name(self, tmp_path: Path):
        path = tmp_path / "prog.dm"
        path.write_bytes(b"")
        assert CharSource.open(path, "main").name == "main"

    def test_bytes_are_single_characters(self, tmp_path: Path):
        path = tmp_path / "bytes.dm"
        path.write_bytes(b"\xc3\xa9")
        assert len(CharSource.open(path).text) == 2

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileOpenError) as exc_info:
            CharSource.open(tmp_path / "nope.dm")
        assert "nope.dm" in str(exc_info.value)
        assert "Error" in exc_info.value.format()
