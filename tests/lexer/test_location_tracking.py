"""Tests for source location tracking in the lexer.

Token locations feed diagnostics and editor integrations. These tests verify
that line numbers, column offsets, and offsets are tracked correctly,
including across the rewinds the keyword and number states perform.
"""

import dataclasses

import pytest

from sqlscan.lexer import Lexer
from sqlscan.location import SourceLocation
from sqlscan.tokens import TokenType


class TestSingleLineLocations:
    def test_first_token(self) -> None:
        token = next(iter(Lexer("select")))
        assert token.location.lineno == 1
        assert token.location.col_offset == 1
        assert token.location.offset == 0
        assert token.location.end_offset == 6

    def test_columns_advance(self) -> None:
        tokens = list(Lexer("select * from `users`").tokenize())
        assert [t.col for t in tokens] == [1, 8, 10, 15, 22]

    def test_rewind_restores_column(self) -> None:
        """Keyword and number states rewind before rescanning."""
        tokens = list(Lexer("  42 limit").tokenize())
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].col == 3
        assert tokens[1].type == TokenType.LIMIT
        assert tokens[1].col == 6

    def test_location_cached(self) -> None:
        token = next(iter(Lexer("select")))
        assert token.location is token.location


class TestMultilineLocations:
    def test_keywords_on_separate_lines(self) -> None:
        tokens = list(Lexer("select *\n  from `t`\nwhere").tokenize())

        from_tok = tokens[2]
        assert from_tok.type == TokenType.FROM
        assert (from_tok.lineno, from_tok.col) == (2, 3)

        where_tok = tokens[4]
        assert where_tok.type == TokenType.WHERE
        assert (where_tok.lineno, where_tok.col) == (3, 1)

    def test_string_spanning_lines(self) -> None:
        tokens = list(Lexer("'a\nb' limit").tokenize())

        assert tokens[0].type == TokenType.STRING
        assert (tokens[0].lineno, tokens[0].col) == (1, 1)
        assert (tokens[1].lineno, tokens[1].col) == (2, 4)

    def test_eof_location(self) -> None:
        tokens = list(Lexer("\n12").tokenize())
        assert (tokens[0].lineno, tokens[0].col) == (2, 1)
        eof = tokens[-1]
        assert eof.type == TokenType.EOF
        assert (eof.lineno, eof.col) == (2, 3)
        assert eof.location.offset == eof.location.end_offset == 3


class TestErrorLocations:
    def test_keyword_error_covers_word(self) -> None:
        tokens = list(Lexer("select\n xyz", name="q").tokenize())
        error = tokens[-1]

        assert error.type == TokenType.ERROR
        assert error.location == SourceLocation(
            lineno=2, col_offset=2, offset=8, end_offset=11, session="q"
        )
        assert str(error.location) == "q:2:2"

    def test_unexpected_character_location(self) -> None:
        error = list(Lexer("* ;").tokenize())[-1]
        assert error.location.offset == 2
        assert error.location.end_offset - error.location.offset == 1


class TestSourceLocation:
    def test_str_without_session(self) -> None:
        assert str(SourceLocation(3, 7)) == "3:7"

    def test_frozen(self) -> None:
        loc = SourceLocation(1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            loc.lineno = 2  # type: ignore[misc]

    def test_hashable_and_comparable(self) -> None:
        a = SourceLocation(2, 3, offset=5, end_offset=9, session="q")
        b = SourceLocation(2, 3, offset=5, end_offset=9, session="q")
        assert a == b
        assert len({a, b}) == 1
