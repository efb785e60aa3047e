"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from quicklaunch.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way it was."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg: str = "hello %s", args: tuple = ("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="quicklaunch.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Tests for the JSON lines formatter."""

    def test_basic_fields(self):
        """Test level, message and timestamp are emitted."""
        entry = json.loads(StructuredJSONFormatter().format(_record()))
        assert entry["level"] == "WARNING"
        assert entry["message"] == "hello world"
        assert entry["timestamp"].endswith("+00:00")
        assert entry["context"]["logger_name"] == "quicklaunch.test"
        assert entry["context"]["line"] == 10

    def test_extra_fields_land_in_context(self):
        """Test fields passed via extra= are included."""
        entry = json.loads(StructuredJSONFormatter().format(_record(hostname="mail.google.com")))
        assert entry["context"]["hostname"] == "mail.google.com"

    def test_exception_info(self):
        """Test exception details are captured."""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        entry = json.loads(StructuredJSONFormatter().format(record))
        assert entry["context"]["error_type"] == "RuntimeError"
        assert entry["context"]["error_message"] == "boom"
        assert "Traceback" in entry["context"]["stack_trace"]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_case_insensitive(self):
        """Test lowercase level names are accepted."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_structured_uses_json_formatter(self):
        """Test structured=True installs the JSON formatter."""
        configure_logging(level="INFO", structured=True)
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, StructuredJSONFormatter)

    def test_noisy_loggers_suppressed(self):
        """Test HTTP library loggers are raised to ERROR."""
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.ERROR
        assert logging.getLogger("httpcore").level == logging.ERROR

    def test_file_output(self, tmp_path):
        """Test logs are written to the given file."""
        log_file = tmp_path / "quicklaunch.log"
        configure_logging(level="INFO", filename=str(log_file))
        logging.getLogger("quicklaunch.test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "INFO: written" in log_file.read_text()


def test_get_logger_with_context_returns_adapter():
    """Test context kwargs wrap the logger in a LoggerAdapter."""
    assert isinstance(get_logger("quicklaunch.x"), logging.Logger)
    adapter = get_logger("quicklaunch.x", hostname="example.com")
    assert isinstance(adapter, logging.LoggerAdapter)
    assert adapter.extra == {"hostname": "example.com"}
