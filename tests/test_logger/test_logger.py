"""Unit tests for the loguru logger wrapper."""

import io
import sys

import pytest

from pkg.logger.constant import LogLevel
from pkg.logger.logger import ILogger, Logger
from pkg.logger.type import LoggerConfig


class TestLoggerConfig:
    """Tests for LoggerConfig validation."""

    def test_defaults(self):
        config = LoggerConfig()
        assert config.level == LogLevel.INFO
        assert config.service_name == "rediscache"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("debug", LogLevel.DEBUG),
            ("INFO", LogLevel.INFO),
            ("warn", LogLevel.WARNING),
            ("Warning", LogLevel.WARNING),
            ("error", LogLevel.ERROR),
        ],
    )
    def test_level_from_string(self, raw, expected):
        assert LoggerConfig(level=raw).level == expected

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggerConfig(level="LOUD")


class TestLogger:
    """Tests for Logger output and trace context."""

    @pytest.fixture
    def logger(self, capsys):
        """Logger bound to the capsys-replaced stdout."""
        return Logger(LoggerConfig(level="DEBUG", colorize=False))

    def test_implements_protocol(self, logger):
        assert isinstance(logger, ILogger)

    def test_writes_to_stdout(self, logger, capsys):
        logger.info("cache ready")
        out = capsys.readouterr().out
        assert "cache ready" in out
        assert "rediscache" in out
        assert "INFO" in out

    def test_level_filtering(self, capsys):
        logger = Logger(LoggerConfig(level="ERROR", colorize=False))
        logger.info("hidden")
        logger.error("shown")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_trace_context(self, logger, capsys):
        assert logger.get_trace_id() is None
        with logger.trace_context(trace_id="trace-abc"):
            assert logger.get_trace_id() == "trace-abc"
            logger.info("inside")
        assert logger.get_trace_id() is None
        assert "trace-abc" in capsys.readouterr().out

    def test_nested_trace_context(self, logger):
        with logger.trace_context(trace_id="outer"):
            with logger.trace_context(trace_id="inner"):
                assert logger.get_trace_id() == "inner"
            assert logger.get_trace_id() == "outer"

    def test_console_disabled(self, capsys):
        logger = Logger(LoggerConfig(enable_console=False))
        logger.error("nowhere")
        assert capsys.readouterr().out == ""

    def test_follows_stdout_replaced_after_setup(self, monkeypatch):
        """Test the sink writes to the current sys.stdout, not the one at setup."""
        logger = Logger(LoggerConfig(level="INFO", colorize=False))
        buffer = io.StringIO()
        monkeypatch.setattr(sys, "stdout", buffer)

        logger.info("after redirect")

        assert "after redirect" in buffer.getvalue()
