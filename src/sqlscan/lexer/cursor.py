"""Scan cursor: position state and scanning primitives.

The cursor tracks two offsets into the source: start marks the beginning of
the token being assembled, pos marks the scan position. The pending span
source[start:pos] is exactly what the next emitted token will carry.

Invariant: 0 <= start <= pos <= len(source) at every observation point.

State functions (sqlscan.lexer.states) drive the cursor exclusively through
the primitives below; nothing else mutates it.
"""

from __future__ import annotations

from collections.abc import Container

from sqlscan.charsets import EOF_CHAR
from sqlscan.config import ScanConfig
from sqlscan.tokens import Token, TokenType
from sqlscan.utils.logger import get_logger

logger = get_logger(__name__)


class Cursor:
    """Position state over one SQL source string.

    Offsets are code-point indexes into the source str. Line and column of
    pos are tracked as the cursor moves; the values at start are saved on
    every discard/emit so a rewind restores them without rescanning.

    Thread Safety:
        Cursor instances are single-use and owned by one Lexer.

    """

    __slots__ = (
        "_name",
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_start",
        "_pos",
        "_lineno",
        "_col",
        "_saved_lineno",  # Line at _start
        "_saved_col",  # Column at _start
        "_config",
        "_trace",  # Cached config.trace for the hot path
    )

    def __init__(self, name: str, source: str, config: ScanConfig | None = None) -> None:
        """Initialize cursor at the beginning of source.

        Args:
            name: Session name, embedded in diagnostics
            source: SQL source text
            config: Scan configuration (defaults to ScanConfig())
        """
        if config is None:
            config = ScanConfig()
        self._name = name
        self._source = source
        self._source_len = len(source)
        self._start = 0
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._saved_lineno = 1
        self._saved_col = 1
        self._config = config
        self._trace = config.trace

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def source(self) -> str:
        return self._source

    @property
    def start(self) -> int:
        """Offset where the token being assembled begins."""
        return self._start

    @property
    def pos(self) -> int:
        """Current scan offset."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= self._source_len

    @property
    def pending(self) -> str:
        """Text scanned since the last emit or discard."""
        return self._source[self._start : self._pos]

    def debug_string(self) -> str:
        """Render source with a '.' marker before the start and pos characters.

        Example:
            >>> c = Cursor("q", "select")
            >>> c.advance()
            's'
            >>> c.advance()
            'e'
            >>> c.debug_string()
            '.se.lect'
        """
        parts = []
        for i, char in enumerate(self._source):
            if i == self._start:
                parts.append(".")
            if i == self._pos:
                parts.append(".")
            parts.append(char)
        return "".join(parts)

    # =========================================================================
    # Scanning primitives
    # =========================================================================

    def advance(self) -> str:
        """Consume one code point.

        Returns:
            The consumed character, or EOF_CHAR at end of input.
        """
        if self._pos >= self._source_len:
            return EOF_CHAR

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        if self._trace:
            logger.debug("[advance] %s", self.debug_string())
        return char

    def peek(self) -> str:
        """Return the next code point without consuming it.

        Returns:
            Current character or EOF_CHAR at end of input.
        """
        if self._pos >= self._source_len:
            return EOF_CHAR
        char = self._source[self._pos]
        if self._trace:
            logger.debug("[peek] %s", self.debug_string())
        return char

    def accepts(self, valid: Container[str]) -> bool:
        """Check whether the next code point is in valid. Never advances.

        End of input is never accepted, even when valid is a str (where
        ``"" in valid`` would otherwise be true).
        """
        char = self.peek()
        return char != EOF_CHAR and char in valid

    def discard_pending(self) -> None:
        """Drop the pending span without emitting it."""
        self._start = self._pos
        self._save_location()

    def rewind_pending(self) -> None:
        """Move pos back to start, undoing everything since the last emit."""
        self._pos = self._start
        self._lineno = self._saved_lineno
        self._col = self._saved_col
        if self._trace:
            logger.debug("[rewind] %s", self.debug_string())

    def emit(self, token_type: TokenType) -> Token:
        """Build a token from the pending span and start a new span.

        The calling state yields the returned token; that yield is the
        point where the scan suspends until the consumer pulls again.
        """
        token = Token(
            token_type,
            self._source[self._start : self._pos],
            self._start,
            self._pos,
            self._saved_lineno,
            self._saved_col,
            self._name,
        )
        self._start = self._pos
        self._save_location()
        return token

    def report_error(self, context: str, text: str) -> Token:
        """Build an ERROR token carrying a formatted diagnostic.

        The diagnostic reads ``ERROR: <session>: <context>: <text>``; text
        itself is kept on the token so LexError.from_token can expose it. The
        pending span is left untouched; whether scanning continues is up to
        the calling state.
        """
        return Token(
            TokenType.ERROR,
            f"ERROR: {self._name}: {context}: {text}",
            self._start,
            self._pos,
            self._saved_lineno,
            self._saved_col,
            self._name,
            text,
        )

    def _save_location(self) -> None:
        self._saved_lineno = self._lineno
        self._saved_col = self._col
