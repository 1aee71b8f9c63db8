"""Pull outcomes reported alongside each token."""

from __future__ import annotations

from enum import Enum, auto

from sqlscan.tokens import Token, TokenType


class ScanOutcome(Enum):
    """Result classification for Lexer.pull().

    - OK: a regular token; more may follow
    - END_OF_INPUT: the EOF token; the session is exhausted
    - LEXICAL_ERROR: an ERROR token; the session is exhausted

    Both terminal outcomes look the same to a caller that only checks
    is_terminal; inspect the token type (or the outcome) to tell a clean
    end from a failure.

    """

    OK = auto()
    END_OF_INPUT = auto()
    LEXICAL_ERROR = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not ScanOutcome.OK

    @classmethod
    def for_token(cls, token: Token) -> ScanOutcome:
        if token.type is TokenType.ERROR:
            return cls.LEXICAL_ERROR
        if token.type is TokenType.EOF:
            return cls.END_OF_INPUT
        return cls.OK
