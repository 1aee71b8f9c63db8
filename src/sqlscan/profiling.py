"""Opt-in profiling for SQL scanning, accumulated in a ScanAccumulator.

This module provides accumulated metrics across scan sessions:
- Total profiling time
- Source length scanned
- Tokens delivered (terminal tokens included)
- Sessions that ended in a lexical error

Zero overhead when disabled (get_scan_accumulator() returns None).
A session is recorded when its terminal token is delivered; sessions the
caller abandons early are not counted.

Example:
    from sqlscan import tokenize
    from sqlscan.profiling import profiled_scan

    with profiled_scan() as metrics:
        list(tokenize("select * from `t`"))

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 17, "token_count": 5, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during SQL scanning.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources scanned.
        token_count: Number of tokens delivered.
        scan_calls: Number of completed scan sessions.
        error_count: Number of sessions that ended in a lexical error.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    scan_calls: int = 0
    error_count: int = 0

    def record_scan(self, source_length: int, token_count: int, failed: bool = False) -> None:
        """Record a completed scan session.

        Args:
            source_length: Length of the source string scanned.
            token_count: Number of tokens delivered, terminal token included.
            failed: Whether the session ended with a lexical error.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        if failed:
            self.error_count += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "scan_calls": self.scan_calls,
            "error_count": self.error_count,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated as sessions complete.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = ["ScanAccumulator", "get_scan_accumulator", "profiled_scan"]
