"""Test identifiers, reserved words, and the identifier length limit."""

import pytest

from dium.errors import IdentifierTooLong
from dium.keywords import RESERVED_WORDS
from dium.lexer import LexerOptions, tokenize
from dium.tokens import TokenType

from tests.conftest import assert_types, assert_values


class TestIdentifiers:
    def test_simple(self, lex):
        tokens = lex("hello")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert_values(tokens, ["hello"])

    def test_underscore_start(self, lex):
        assert_values(lex("_tmp"), ["_tmp"])

    def test_digits_inside(self, lex):
        assert_values(lex("x1y2"), ["x1y2"])

    def test_mixed_case(self, lex):
        assert_values(lex("FizzBuzz"), ["FizzBuzz"])

    def test_separated_by_operator(self, lex):
        tokens = lex("a+b")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.PLUS, TokenType.IDENTIFIER])
        assert_values(tokens, ["a", None, "b"])

    def test_number_then_word(self, lex):
        tokens = lex("10abc")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENTIFIER])
        assert_values(tokens, [10, "abc"])

    def test_lexeme_matches_value(self, lex):
        tokens = lex("count")
        assert tokens[0].lexeme == "count"

    def test_span(self, lex):
        tokens = lex("  name")
        assert tokens[0].span.start.column == 3
        assert tokens[0].span.end.column == 7


class TestReservedWords:
    @pytest.mark.parametrize("word", RESERVED_WORDS, ids=lambda w: w.spelling)
    def test_every_table_spelling(self, lex, word):
        tokens = lex(word.spelling)
        assert_types(tokens, [word.type])
        assert_values(tokens, [word.spelling])

    def test_prefix_is_identifier(self, lex):
        assert_types(lex("whiles"), [TokenType.IDENTIFIER])

    def test_case_sensitive(self, lex):
        assert_types(lex("If"), [TokenType.IDENTIFIER])

    def test_print_vs_println(self, lex):
        assert_types(lex("print println"), [TokenType.PRINT, TokenType.PRINTLN])

    def test_type_names_are_identifiers(self, lex):
        tokens = lex("num string bool char dec")
        assert all(t.type == TokenType.IDENTIFIER for t in tokens)


class TestLengthLimit:
    def test_at_limit(self, lex):
        name = "a" * 32
        assert_values(lex(name), [name])

    def test_over_limit(self):
        with pytest.raises(IdentifierTooLong) as exc_info:
            tokenize("x = " + "b" * 33)
        err = exc_info.value
        assert err.position.line == 1
        assert err.position.column == 5

    def test_custom_limit(self):
        with pytest.raises(IdentifierTooLong, match="longer than 4"):
            tokenize("abcde", options=LexerOptions(max_identifier_length=4))

    def test_custom_limit_allows(self):
        tokens = tokenize("abcd", options=LexerOptions(max_identifier_length=4))
        assert tokens[0].value == "abcd"
