"""State-transition table for the SQL scanner.

Each state is a generator function of the cursor: it yields the tokens it
recognizes and returns the next state, or None once scanning is finished.
The driver (Lexer.tokenize) chains them with ``state = yield from state(cursor)``,
so a state suspends exactly where it yields a token.

States:
    scan_any        Initial dispatch on the next code point
    scan_keyword    Maximal run of letters matched against KEYWORDS
    scan_number     Digits, optional '.', digits
    scan_string     '...' (no escapes)
    scan_backtick   `...` (no escapes)

Every terminal path yields exactly one EOF or ERROR token before
returning None.
"""

from __future__ import annotations

from collections.abc import Callable, Generator

from sqlscan.charsets import (
    AFTER_BANG,
    AFTER_GREATER,
    AFTER_LESS,
    BACKTICK,
    DECIMAL_POINT,
    DIGITS,
    EOF_CHAR,
    LETTERS,
    SIMPLE_OPERATORS,
    STRING_QUOTE,
    WHITESPACE,
)
from sqlscan.lexer.cursor import Cursor
from sqlscan.tokens import KEYWORDS, Token, TokenType

StateResult = Generator[Token, None, "State | None"]
State = Callable[[Cursor], StateResult]

# Comparison operators: first char -> code points allowed to follow it
_COMPARISON_FOLLOW: dict[str, frozenset[str]] = {
    "!": AFTER_BANG,
    ">": AFTER_GREATER,
    "<": AFTER_LESS,
}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "*": TokenType.STAR,
    ",": TokenType.SEP,
}


def scan_any(cursor: Cursor) -> StateResult:
    """Dispatch on the next code point."""
    if cursor.at_end:
        yield cursor.emit(TokenType.EOF)
        return None

    char = cursor.advance()

    if char == STRING_QUOTE:
        return scan_string
    if char == BACKTICK:
        return scan_backtick

    if char in WHITESPACE:
        cursor.discard_pending()
        return scan_any

    single = _SINGLE_CHAR_TOKENS.get(char)
    if single is not None:
        yield cursor.emit(single)
        return scan_any

    if char in SIMPLE_OPERATORS:
        yield cursor.emit(TokenType.OP)
        return scan_any

    follow = _COMPARISON_FOLLOW.get(char)
    if follow is not None:
        # Only the first character is emitted; a following '=' or '>'
        # is scanned as its own OP on the next dispatch.
        if not cursor.accepts(follow):
            yield cursor.report_error("unsupported op", cursor.pending)
            return None
        yield cursor.emit(TokenType.OP)
        return scan_any

    if char in DIGITS:
        cursor.rewind_pending()
        return scan_number
    if char in LETTERS:
        cursor.rewind_pending()
        return scan_keyword

    yield cursor.report_error("unexpected character", cursor.pending)
    return None


def scan_keyword(cursor: Cursor) -> StateResult:
    """Scan a bare word and classify it against the keyword vocabulary.

    Matching is case-insensitive; the token value keeps the source casing.
    Words outside the vocabulary are fatal unless identifiers are enabled,
    in which case they become LITERAL tokens.
    """
    while cursor.accepts(LETTERS):
        cursor.advance()

    word = cursor.pending
    token_type = KEYWORDS.get(word.upper())
    if token_type is not None:
        yield cursor.emit(token_type)
        return scan_any

    if cursor.config.identifiers_enabled:
        yield cursor.emit(TokenType.LITERAL)
        return scan_any

    yield cursor.report_error("keyword doesn't exist", word)
    return None


def scan_number(cursor: Cursor) -> StateResult:
    """Scan an unsigned integer or decimal.

    A trailing '.' with no digits after it is part of the literal ("12.").
    """
    while cursor.accepts(DIGITS):
        cursor.advance()
    if cursor.accepts(DECIMAL_POINT):
        cursor.advance()
    while cursor.accepts(DIGITS):
        cursor.advance()

    yield cursor.emit(TokenType.NUMBER)
    return scan_any


def scan_string(cursor: Cursor) -> StateResult:
    """Scan the body of a single-quoted string; the opening quote is pending."""
    return (yield from _scan_quoted(cursor, STRING_QUOTE, TokenType.STRING, "string"))


def scan_backtick(cursor: Cursor) -> StateResult:
    """Scan the body of a backtick-quoted identifier; the opening backtick is pending."""
    return (yield from _scan_quoted(cursor, BACKTICK, TokenType.LITERAL, "identifier"))


def _scan_quoted(
    cursor: Cursor, quote: str, token_type: TokenType, what: str
) -> StateResult:
    while True:
        char = cursor.advance()
        if char == quote:
            yield cursor.emit(token_type)
            return scan_any
        if char == EOF_CHAR:
            yield cursor.report_error(f"unterminated {what}", cursor.pending)
            return None


__all__ = [
    "State",
    "StateResult",
    "scan_any",
    "scan_backtick",
    "scan_keyword",
    "scan_number",
    "scan_string",
]
