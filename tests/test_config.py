"""
Tests for settings and logging configuration.
"""

import io
import logging

import pytest
from pydantic import ValidationError

from ledger.config import Settings
from ledger.logging_setup import configure_logging, get_logger


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LEDGER_LOG_LEVEL", "LEDGER_LOG_FORMAT", "LEDGER_SORT_OUTPUT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_FORMAT == "text"
        assert settings.SORT_OUTPUT is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LEDGER_SORT_OUTPUT", "true")

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.SORT_OUTPUT is True

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:
    def test_configure_writes_to_stream(self):
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)

        get_logger("ledger.test").info("hello")

        assert "ledger.test INFO hello" in stream.getvalue()

    def test_reconfigure_replaces_handler(self):
        first, second = io.StringIO(), io.StringIO()
        configure_logging("INFO", stream=first)
        configure_logging("INFO", stream=second)

        get_logger("ledger.test").info("once")

        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1
        assert len(logging.getLogger("ledger").handlers) == 1

    def test_level_filters(self):
        stream = io.StringIO()
        configure_logging("warning", stream=stream)

        get_logger("ledger.test").info("quiet")

        assert stream.getvalue() == ""

    @pytest.mark.parametrize("kwargs", [{"level": "LOUD"}, {"fmt": "xml"}])
    def test_invalid_options(self, kwargs):
        with pytest.raises(ValueError):
            configure_logging(stream=io.StringIO(), **kwargs)
