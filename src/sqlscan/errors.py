"""Exception classes for sqlscan.

The scanner itself never raises for malformed input: lexical problems travel
as ERROR tokens so the pull API can report them as a terminal outcome. These
exceptions are for callers that prefer exceptions, such as sqlscan.scan().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlscan.tokens import Token


class SqlScanError(Exception):
    """Base exception for all sqlscan errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(SqlScanError):
    """Lexical error in SQL source.

    Raised when a caller asks for an exception in place of an ERROR token.
    """

    def __init__(
        self,
        message: str,
        session: str | None = None,
        offset: int | None = None,
        lexeme: str | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize lexical error with optional location.

        Args:
            message: Formatted diagnostic, as carried by the ERROR token
            session: Name of the scan session
            offset: Start offset of the offending span in source
            lexeme: The offending source text
            lineno: Line where the offending span starts (1-indexed)
            col_offset: Column where the offending span starts (1-indexed)
        """
        self.message = message
        self.session = session
        self.offset = offset
        self.lexeme = lexeme
        self.lineno = lineno
        self.col_offset = col_offset

        # Build "(line:col, offset N)" suffix from whatever is known
        parts = []
        if lineno is not None:
            parts.append(f"{lineno}:{col_offset}" if col_offset is not None else f"line {lineno}")
        if offset is not None:
            parts.append(f"offset {offset}")
        location = f" ({', '.join(parts)})" if parts else ""

        super().__init__(f"{message}{location}")

    @classmethod
    def from_token(cls, token: Token) -> LexError:
        """Build a LexError from an ERROR token."""
        return cls(
            token.value,
            session=token._session,
            offset=token._start_offset,
            lexeme=token._lexeme,
            lineno=token._lineno,
            col_offset=token._col,
        )
