"""Source location tracking for diagnostics and debugging.

Provides SourceLocation dataclass for tracking positions in SQL source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for diagnostics and debugging.

    Line and column are 1-indexed. Offsets are code-point indexes into the
    scanned source, with end_offset exclusive.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source
        session: Name of the scan session (optional)

    Examples:
        >>> loc = SourceLocation(lineno=2, col_offset=8, session="query")
        >>> str(loc)
        'query:2:8'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    session: str | None = None

    def __str__(self) -> str:
        """Format location for diagnostics.

        Returns:
            Formatted string like "query:10:5" or "10:5"
        """
        if self.session:
            return f"{self.session}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
