"""Test the reserved-word table."""

from dium.keywords import RESERVED_WORDS, is_reserved, lookup
from dium.tokens import TokenType


class TestTable:
    def test_sorted(self):
        spellings = [w.spelling for w in RESERVED_WORDS]
        assert spellings == sorted(spellings)

    def test_unique(self):
        spellings = [w.spelling for w in RESERVED_WORDS]
        assert len(spellings) == len(set(spellings))

    def test_every_entry_found(self):
        for word in RESERVED_WORDS:
            assert lookup(word.spelling) == word.type

    def test_lookup_in_reverse_order(self):
        for word in reversed(RESERVED_WORDS):
            assert lookup(word.spelling) == word.type


class TestMisses:
    def test_identifier(self):
        assert lookup("counter") is None

    def test_before_first(self):
        assert lookup("a") is None

    def test_after_last(self):
        assert lookup("zzz") is None

    def test_prefix(self):
        assert lookup("els") is None
        assert lookup("prin") is None

    def test_empty(self):
        assert lookup("") is None


def test_is_reserved():
    assert is_reserved("while")
    assert not is_reserved("While")
    assert lookup("elsif") == TokenType.ELSIF
