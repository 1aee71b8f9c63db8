"""ContextVar-based scan configuration for sqlscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is created, so changing the
config mid-scan never affects a session already in progress.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from sqlscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(identifiers_enabled=True)):
        tokens = list(tokenize("select name from users"))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        identifiers_enabled: Emit LITERAL tokens for bare words outside the
            keyword vocabulary instead of failing with a lexical error
        trace: Log the cursor position (via Cursor.debug_string) at DEBUG
            level on every advance, peek, and rewind

    """

    identifiers_enabled: bool = False
    trace: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "identifiers_enabled": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.identifiers_enabled
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> from sqlscan.lexer import Lexer
        >>> with scan_config_context(ScanConfig(trace=True)):
        ...     lexer = Lexer("select *")
        >>> get_scan_config().trace
        False

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
