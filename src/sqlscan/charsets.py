"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from sqlscan.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

# Sentinel returned by the cursor when no code point remains
EOF_CHAR = ""

DIGITS: frozenset[str] = frozenset("0123456789")

# Bare words and keywords are ASCII-only
LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# Separators discarded between tokens
WHITESPACE: frozenset[str] = frozenset(" \n")

# Single-character operators that never need lookahead
SIMPLE_OPERATORS: frozenset[str] = frozenset("=+-/")

# Code points allowed after a comparison operator's first character
AFTER_BANG: frozenset[str] = frozenset("=")
AFTER_GREATER: frozenset[str] = frozenset("= ")
AFTER_LESS: frozenset[str] = frozenset("= >")

STRING_QUOTE = "'"
BACKTICK = "`"
DECIMAL_POINT = "."
