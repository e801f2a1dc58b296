"""Tests for parenlex utility modules and scan logging."""

import logging

import pytest

from parenlex import LexConfig, lex_config_context, tokenize
from parenlex.utils.logger import LOGGER_NAME, get_logger


class TestGetLogger:
    def test_adds_prefix(self) -> None:
        assert get_logger("mymodule").name == "parenlex.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("parenlex.lexer.core").name == "parenlex.lexer.core"

    def test_root_package_name(self) -> None:
        assert get_logger("parenlex").name == "parenlex"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_lookalike_name_is_prefixed(self) -> None:
        assert get_logger("parenlexer").name == "parenlex.parenlexer"

    def test_scanner_logger_is_under_namespace(self) -> None:
        from parenlex.lexer.core import logger

        assert logger.name == f"{LOGGER_NAME}.lexer.core"


class TestTruncationLogging:
    def test_logs_early_stop(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="parenlex"):
            tokenize("(a\tb)")
        records = [r for r in caplog.records if r.name == "parenlex.lexer.core"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "offset 2" in records[0].getMessage()

    def test_silent_on_complete_scan(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="parenlex"):
            tokenize("(a b)")
        assert not [r for r in caplog.records if r.name.startswith("parenlex")]

    def test_log_truncation_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="parenlex"):
            with lex_config_context(LexConfig(log_truncation=False)):
                tokenize("(a\tb)")
        assert not [r for r in caplog.records if r.name.startswith("parenlex")]
