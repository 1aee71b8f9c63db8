"""Tests for ContextVar-based scan configuration.

Validates thread isolation, context manager behavior, from_dict, and how a
Lexer snapshots the active config.
"""

from threading import Thread

import pytest

from sqlscan import (
    Lexer,
    ScanConfig,
    Token,
    TokenType,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
    tokenize,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.identifiers_enabled is False
        assert config.trace is False

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.trace = True  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ScanConfig(trace=True) == ScanConfig(trace=True)
        assert ScanConfig(trace=True) != ScanConfig()


class TestScanConfigFromDict:
    def test_from_dict_basic(self) -> None:
        config = ScanConfig.from_dict({"identifiers_enabled": True})
        assert config.identifiers_enabled is True
        assert config.trace is False

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"trace": True, "dialect": "mysql", "x": 42})
        assert config == ScanConfig(trace=True)

    def test_from_dict_empty(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestConfigContext:
    def setup_method(self) -> None:
        reset_scan_config()

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_default_config_active(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_reset(self) -> None:
        set_scan_config(ScanConfig(identifiers_enabled=True))
        assert get_scan_config().identifiers_enabled is True
        reset_scan_config()
        assert get_scan_config().identifiers_enabled is False

    def test_context_manager_restores(self) -> None:
        with scan_config_context(ScanConfig(trace=True)):
            assert get_scan_config().trace is True
        assert get_scan_config().trace is False

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(trace=True)):
                raise RuntimeError("boom")
        assert get_scan_config().trace is False

    def test_nested_contexts(self) -> None:
        with scan_config_context(ScanConfig(trace=True)):
            with scan_config_context(ScanConfig(identifiers_enabled=True)):
                assert get_scan_config() == ScanConfig(identifiers_enabled=True)
            assert get_scan_config() == ScanConfig(trace=True)

    def test_lexer_snapshots_config_at_creation(self) -> None:
        with scan_config_context(ScanConfig(identifiers_enabled=True)):
            lexer = Lexer("select name")
        tokens = list(lexer.tokenize())
        assert tokens[1] == Token(TokenType.LITERAL, "name")

    def test_explicit_config_overrides_context(self) -> None:
        with scan_config_context(ScanConfig(identifiers_enabled=True)):
            tokens = list(tokenize("name", config=ScanConfig()))
        assert tokens[0].type == TokenType.ERROR

    def test_thread_isolation(self) -> None:
        results: dict[str, bool] = {}

        def worker() -> None:
            results["worker"] = get_scan_config().identifiers_enabled

        with scan_config_context(ScanConfig(identifiers_enabled=True)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()
            results["main"] = get_scan_config().identifiers_enabled

        assert results == {"worker": False, "main": True}


class TestIdentifiersMode:
    """Bare words outside the vocabulary become LITERAL tokens."""

    def config(self) -> ScanConfig:
        return ScanConfig(identifiers_enabled=True)

    def test_reference_query_scans_cleanly(self) -> None:
        source = "select * from `table` where `a` = xyz"
        tokens = list(tokenize(source, config=self.config()))

        assert tokens[-2] == Token(TokenType.LITERAL, "xyz")
        assert tokens[-1].type == TokenType.EOF

    def test_keywords_still_recognized(self) -> None:
        tokens = list(tokenize("SELECT name FROM users", config=self.config()))
        assert [t.type for t in tokens] == [
            TokenType.SELECT,
            TokenType.LITERAL,
            TokenType.FROM,
            TokenType.LITERAL,
            TokenType.EOF,
        ]

    def test_bare_and_quoted_identifiers_share_type(self) -> None:
        tokens = list(tokenize("name `name`", config=self.config()))
        assert tokens[0].type == tokens[1].type == TokenType.LITERAL
        assert tokens[0].value == "name"
        assert tokens[1].value == "`name`"

    def test_other_errors_unchanged(self) -> None:
        tokens = list(tokenize("name ;", config=self.config()))
        assert tokens[-1].type == TokenType.ERROR
