"""Token and TokenType definitions for the sqlscan lexer.

The lexer produces a stream of Token objects that a downstream parser consumes.
Each Token has a type, the exact source text it matched, and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Coordinates are excluded from comparison: two tokens are equal when their
type and value are equal, wherever they were scanned from.

"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlscan.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by family:
    - Terminal markers (EOF, ERROR)
    - Structural and operator kinds
    - Literal kinds (identifiers, numbers, strings)
    - Keywords

    Only the keywords in KEYWORDS are reachable from the scanner; the
    remaining keyword kinds, DOT, PAREN, and DBL_STRING are reserved for
    grammar extensions.

    """

    # Terminal markers
    EOF = auto()
    ERROR = auto()

    # Structural and operators
    STAR = auto()  # *
    SEP = auto()  # ,
    DOT = auto()  # .
    OP = auto()  # = + - / != <> <= >= < >
    PAREN = auto()  # ( )

    # Literals
    LITERAL = auto()  # `identifier`
    NUMBER = auto()  # 123, 12.5, 12.
    STRING = auto()  # 'text'
    DBL_STRING = auto()  # "text"

    # Keywords
    SELECT = auto()
    DISTINCT = auto()
    FROM = auto()
    WHERE = auto()
    GROUP = auto()
    ORDER = auto()
    BY = auto()
    HAVING = auto()
    LIMIT = auto()
    JOIN = auto()
    LEFT = auto()
    RIGHT = auto()
    INNER = auto()
    OUTER = auto()
    ON = auto()
    AS = auto()
    UNION = auto()
    ALL = auto()
    AND = auto()
    OR = auto()
    BETWEEN = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()
    IS = auto()
    NOT = auto()
    LIKE = auto()
    EXISTS = auto()

    @property
    def is_keyword(self) -> bool:
        """True for members of the keyword family."""
        return self.value >= TokenType.SELECT.value

    @property
    def is_terminal(self) -> bool:
        """True for EOF and ERROR, after which no token follows."""
        return self is TokenType.EOF or self is TokenType.ERROR


# Keyword vocabulary recognized by the scanner (uppercased bare word -> type)
KEYWORDS: dict[str, TokenType] = {
    t.name: t
    for t in (
        TokenType.SELECT,
        TokenType.DISTINCT,
        TokenType.FROM,
        TokenType.WHERE,
        TokenType.GROUP,
        TokenType.ORDER,
        TokenType.BY,
        TokenType.HAVING,
        TokenType.LIMIT,
        TokenType.JOIN,
        TokenType.LEFT,
        TokenType.RIGHT,
        TokenType.INNER,
        TokenType.OUTER,
        TokenType.ON,
        TokenType.AS,
        TokenType.UNION,
        TokenType.ALL,
    )
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The exact source text matched, original casing, delimiters
            included. For ERROR tokens, the formatted diagnostic instead.
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _session: Name of the scan session that produced the token
        _lexeme: For ERROR tokens, the offending source text

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    _start_offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _lineno: int = field(default=1, compare=False)
    _col: int = field(default=1, compare=False)
    _session: str | None = field(default=None, compare=False)
    # Offending source text; only set on ERROR tokens
    _lexeme: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from sqlscan.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            session=self._session,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    def raise_for_error(self) -> None:
        """Raise LexError if this is an ERROR token; no-op otherwise."""
        if self.type is TokenType.ERROR:
            from sqlscan.errors import LexError

            raise LexError.from_token(self)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"


def render(token: Token) -> str:
    """Render a token for display.

    EOF renders as the bare text ``EOF``, ERROR renders its diagnostic
    unquoted, and every other kind renders as a double-quoted copy of its
    value.

    Quoting follows JSON string rules: double quotes, backslashes and control
    characters below U+0020 are escaped, while DEL and non-ASCII text pass
    through unchanged.

    Example:
        >>> render(Token(TokenType.SELECT, "select"))
        '"select"'
        >>> render(Token(TokenType.EOF, ""))
        'EOF'
    """
    if token.type is TokenType.EOF:
        return "EOF"
    if token.type is TokenType.ERROR:
        return token.value
    return json.dumps(token.value, ensure_ascii=False)


__all__ = ["KEYWORDS", "Token", "TokenType", "render"]
