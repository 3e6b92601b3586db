"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import structlog

from conectl.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("conectl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("conectl").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=buf)
        structlog.get_logger("conectl.test").warning("json test", answer=42)
        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "conectl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=buf)
        logging.getLogger("conectl.domain.catalog").debug("Registered ingredient X")
        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "Registered ingredient X"
        assert parsed["level"] == "debug"

    def test_debug_hidden_when_not_verbose(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=buf)
        logging.getLogger("conectl.domain.chain").debug("noise")
        assert buf.getvalue() == ""

    def test_console_mode_output(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=True, stream=buf)
        structlog.get_logger("conectl.test").warning("hello world", key="val")
        out = buf.getvalue()
        assert "hello world" in out
        assert "key" in out

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
