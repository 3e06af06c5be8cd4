"""
Tests for the logging module.

Tests verify:
- JSON output carries service metadata
- DEBUG logs are suppressed at higher levels
- Settings are used when arguments are omitted
- Unknown levels are rejected
- Nothing is emitted before configure_logging runs
- Existing root handlers survive configuration
"""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from err_or import NOTHING, Err, Ok, UnwrapError
from err_or.errors import ConfigError
from err_or.logging import configure_logging, get_logger
from err_or.settings import ErrOrSettings

SRC = Path(__file__).parent.parent / "src"


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def _json_events(caplog: pytest.LogCaptureFixture) -> list[dict]:
    return [json.loads(m) for m in caplog.messages if m.startswith("{")]


class TestConfigureLogging:
    def test_json_output_has_service_metadata(self, caplog):
        configure_logging(level="DEBUG", json_format=True, service="test-service")
        get_logger("err_or.test").info("event_happened", count=42)

        events = _json_events(caplog)
        assert len(events) == 1
        event = events[0]
        assert event["event"] == "event_happened"
        assert event["count"] == 42
        assert event["level"] == "info"
        assert event["logger"] == "err_or.test"
        assert event["service.name"] == "test-service"
        assert "timestamp" in event

    def test_debug_suppressed_at_info(self, caplog):
        configure_logging(level="INFO", json_format=True)
        logger = get_logger("err_or.test")
        logger.debug("hidden")
        logger.info("shown")

        assert [e["event"] for e in _json_events(caplog)] == ["shown"]

    def test_level_is_case_insensitive(self, caplog):
        configure_logging(level="debug", json_format=True)
        get_logger("err_or.test").debug("visible")
        assert _json_events(caplog)[0]["event"] == "visible"

    def test_unknown_level_raises(self):
        with pytest.raises(ConfigError, match="VERBOSE") as exc_info:
            configure_logging(level="VERBOSE")
        assert exc_info.value.context.operation == "configure_logging"

    def test_console_renderer(self, caplog):
        configure_logging(level="INFO", json_format=False)
        get_logger("err_or.test").info("plain_event")
        assert "plain_event" in caplog.text
        assert _json_events(caplog) == []

    def test_keeps_existing_root_handlers(self):
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            configure_logging(level="INFO", json_format=True)
            assert handler in root.handlers
        finally:
            root.removeHandler(handler)


class TestSettingsFallback:
    def test_explicit_settings(self, caplog):
        settings = ErrOrSettings(log_level="ERROR", log_json=True, service_name="svc")
        configure_logging(settings=settings)
        logger = get_logger("err_or.test")
        logger.warning("dropped")
        logger.error("kept")

        events = _json_events(caplog)
        assert [e["event"] for e in events] == ["kept"]
        assert events[0]["service.name"] == "svc"

    def test_environment_settings(self, monkeypatch, caplog):
        monkeypatch.setenv("ERR_OR_LOG_LEVEL", "debug")
        monkeypatch.setenv("ERR_OR_LOG_JSON", "true")
        configure_logging()
        get_logger("err_or.test").debug("from_env")

        assert _json_events(caplog)[0]["event"] == "from_env"

    def test_unwrap_failure_is_logged(self, caplog):
        configure_logging(level="DEBUG", json_format=True)
        with pytest.raises(UnwrapError):
            NOTHING.unwrap()

        event = _json_events(caplog)[0]
        assert event["event"] == "unwrap_failed"
        assert event["variant"] == "Nothing"
        assert event["logger"] == "err_or.option"


class TestUnconfigured:
    """Before configure_logging, misuse diagnostics stay silent."""

    def test_unwrap_writes_nothing(self, capsys, caplog):
        with pytest.raises(UnwrapError):
            NOTHING.unwrap()
        with pytest.raises(UnwrapError):
            Err("x").unwrap()
        with pytest.raises(UnwrapError):
            Ok(1).unwrap_err()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
        assert caplog.records == []

    def test_fresh_interpreter_writes_nothing(self):
        code = (
            "from err_or import NOTHING, Err, UnwrapError\n"
            "for container in (NOTHING, Err('x')):\n"
            "    try:\n"
            "        container.unwrap()\n"
            "    except UnwrapError:\n"
            "        pass\n"
        )
        env = {**os.environ, "PYTHONPATH": str(SRC)}
        proc = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, env=env
        )
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout == ""
        assert proc.stderr == ""
