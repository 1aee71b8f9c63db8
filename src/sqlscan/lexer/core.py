"""Lazy state-machine lexer for SQL query text.

Runs the state-transition table (sqlscan.lexer.states) as a generator: each
pull resumes the pending state function until it yields the next token.
Nothing runs ahead of the consumer, so a caller that stops pulling early
leaves nothing behind but an unreferenced generator.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Generator, Iterator

from sqlscan.config import ScanConfig, get_scan_config
from sqlscan.lexer.cursor import Cursor
from sqlscan.lexer.outcome import ScanOutcome
from sqlscan.lexer.states import State, scan_any
from sqlscan.profiling import get_scan_accumulator
from sqlscan.tokens import Token
from sqlscan.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Pull-driven SQL lexer.

    Usage:
        >>> lexer = Lexer("select * from `t`", name="query")
        >>> lexer.pull()
        (Token(SELECT, 'select', 1:1), <ScanOutcome.OK: 1>)
        >>> [str(t) for t in lexer]
        ['"*"', '"from"', '"`t`"', 'EOF']

    Every session ends with exactly one terminal token (EOF or ERROR).
    Pulling after that returns the same terminal result again.

    """

    __slots__ = (
        "_cursor",
        "_config",
        "_driver",
        "_terminal",
        "_token_count",
    )

    def __init__(
        self,
        source: str,
        name: str = "sql",
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: SQL source text
            name: Session name, embedded in diagnostics
            config: Scan configuration; defaults to the active context config
        """
        self._config = config if config is not None else get_scan_config()
        self._cursor = Cursor(name, source, self._config)
        self._driver = self._run()
        self._terminal: tuple[Token, ScanOutcome] | None = None
        self._token_count = 0

    @property
    def name(self) -> str:
        return self._cursor.name

    @property
    def cursor(self) -> Cursor:
        """The scan cursor (read-only use; states own all mutation)."""
        return self._cursor

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def exhausted(self) -> bool:
        """True once the terminal token has been delivered."""
        return self._terminal is not None

    def pull(self) -> tuple[Token, ScanOutcome]:
        """Scan and return the next token with its outcome.

        Returns:
            (token, ScanOutcome.OK) for a regular token,
            (eof_token, ScanOutcome.END_OF_INPUT) at end of input,
            (error_token, ScanOutcome.LEXICAL_ERROR) on a lexical error.
        """
        if self._terminal is not None:
            return self._terminal

        token = next(self._driver)
        self._token_count += 1
        outcome = ScanOutcome.for_token(token)
        if outcome.is_terminal:
            self._terminal = (token, outcome)
            self._finish(token, outcome)
        return token, outcome

    def tokenize(self) -> Iterator[Token]:
        """Yield remaining tokens, ending with the terminal EOF or ERROR token.

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        while True:
            token, outcome = self.pull()
            yield token
            if outcome.is_terminal:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def _run(self) -> Generator[Token, None, None]:
        """Drive the transition table until a state returns None."""
        logger.debug(
            "scan %r started (%d chars)", self._cursor.name, len(self._cursor.source)
        )
        state: State | None = scan_any
        while state is not None:
            state = yield from state(self._cursor)

    def _finish(self, token: Token, outcome: ScanOutcome) -> None:
        self._driver.close()

        if outcome is ScanOutcome.LEXICAL_ERROR:
            logger.debug("scan %r stopped: %s", self._cursor.name, token.value)
        else:
            logger.debug(
                "scan %r finished (%d tokens)", self._cursor.name, self._token_count
            )

        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(
                source_length=len(self._cursor.source),
                token_count=self._token_count,
                failed=outcome is ScanOutcome.LEXICAL_ERROR,
            )
