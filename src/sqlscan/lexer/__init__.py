"""State-machine lexer for SQL query text.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Cursor, ScanOutcome
├── core.py              # Lexer class (driver + pull API)
├── cursor.py            # Cursor: position state and scanning primitives
├── outcome.py           # ScanOutcome enum
└── states.py            # State-transition table (scan_any, scan_keyword, ...)

Usage:
    >>> from sqlscan.lexer import Lexer
    >>> for token in Lexer("select * from `users`").tokenize():
    ...     print(repr(token))
    Token(SELECT, 'select', 1:1)
    Token(STAR, '*', 1:8)
    Token(FROM, 'from', 1:10)
    Token(LITERAL, '`users`', 1:15)
    Token(EOF, '', 1:22)

"""

from sqlscan.lexer.core import Lexer
from sqlscan.lexer.cursor import Cursor
from sqlscan.lexer.outcome import ScanOutcome

__all__ = ["Cursor", "Lexer", "ScanOutcome"]
