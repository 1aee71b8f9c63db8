"""
sqlscan: a hand-written SQL query scanner

Turns raw SQL text into a lazy stream of classified tokens: keywords,
operators, numbers, quoted strings, and backtick identifiers. Intended as the
front end of a SQL-processing pipeline; there is no grammar or AST layer.

Quick Start:
    >>> from sqlscan import create, pull, render
    >>> session = create("query", "select * from `users`")
    >>> token, outcome = pull(session)
    >>> render(token)
    '"select"'

    >>> # Or iterate
    >>> from sqlscan import tokenize
    >>> [t.type.name for t in tokenize("select * from `users`")]
    ['SELECT', 'STAR', 'FROM', 'LITERAL', 'EOF']

    >>> # Or fail fast
    >>> from sqlscan import scan
    >>> scan("select xyz")
    Traceback (most recent call last):
    ...
    sqlscan.errors.LexError: ERROR: sql: keyword doesn't exist: xyz (1:8, offset 7)

Installation:
    pip install sqlscan              # Zero runtime dependencies
"""

from collections.abc import Iterator

from sqlscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from sqlscan.errors import LexError, SqlScanError
from sqlscan.lexer import Cursor, Lexer, ScanOutcome
from sqlscan.location import SourceLocation
from sqlscan.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from sqlscan.tokens import KEYWORDS, Token, TokenType, render

__version__ = "0.1.0"


def create(name: str, source: str, *, config: ScanConfig | None = None) -> Lexer:
    """Begin a scan session over source.

    Scanning is lazy: no input is read until the first pull.

    Args:
        name: Session name, embedded in diagnostics
        source: SQL source text
        config: Scan configuration (uses the active context config if None)

    Returns:
        Lexer for the session
    """
    return Lexer(source, name=name, config=config)


def pull(session: Lexer) -> tuple[Token, ScanOutcome]:
    """Retrieve the next token from a session.

    Returns:
        (token, outcome); outcome.is_terminal is True for both EOF and
        lexical errors, so check the token type to tell them apart.
    """
    return session.pull()


def tokenize(source: str, *, name: str = "sql", config: ScanConfig | None = None) -> Iterator[Token]:
    """Tokenize source, yielding every token including the terminal one.

    Example:
        >>> [str(t) for t in tokenize("select 12.5")]
        ['"select"', '"12.5"', 'EOF']
    """
    return Lexer(source, name=name, config=config).tokenize()


def scan(source: str, *, name: str = "sql", config: ScanConfig | None = None) -> list[Token]:
    """Tokenize source eagerly.

    Returns:
        All tokens except the trailing EOF

    Raises:
        LexError: If the source contains a lexical error
    """
    tokens = []
    for token in tokenize(source, name=name, config=config):
        token.raise_for_error()
        if token.type is TokenType.EOF:
            break
        tokens.append(token)
    return tokens


__all__ = [
    # Core API
    "create",
    "pull",
    "render",
    "scan",
    "tokenize",
    # Classes
    "Cursor",
    "Lexer",
    "ScanOutcome",
    "SourceLocation",
    "Token",
    "TokenType",
    "KEYWORDS",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "LexError",
    "SqlScanError",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
