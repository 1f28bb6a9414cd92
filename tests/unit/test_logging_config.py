"""
Unit tests for logging configuration
"""
import json
import logging

import pytest

from artviz.core.logging import build_formatter, setup_logging
from artviz.middleware.logging_middleware import request_id_var


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield root_logger
    root_logger.handlers = handlers
    root_logger.setLevel(level)


def _record(msg, *args, name="artviz.tests", level=logging.INFO, **extra):
    record = logging.LogRecord(name, level, __file__, 1, msg, args, None)
    record.__dict__.update(extra)
    return record


class TestJsonLogging:
    """Tests for LOG_FORMAT=json"""

    @pytest.mark.unit
    def test_stdlib_records_render_as_json(self, settings_factory, restore_root_logger):
        setup_logging(settings_factory(log_format="json"))
        formatter = restore_root_logger.handlers[0].formatter

        line = formatter.format(_record("Visualizing %s", "painting"))

        payload = json.loads(line)
        assert payload["event"] == "Visualizing painting"
        assert payload["level"] == "info"
        assert payload["logger"] == "artviz.tests"
        assert "timestamp" in payload

    @pytest.mark.unit
    def test_request_fields_are_included(self):
        formatter = build_formatter("json")
        token = request_id_var.set("ab12cd34")
        try:
            line = formatter.format(_record("request finished", status_code=200, phase="request_end"))
        finally:
            request_id_var.reset(token)

        payload = json.loads(line)
        assert payload["request_id"] == "ab12cd34"
        assert payload["status_code"] == 200
        assert payload["phase"] == "request_end"

    @pytest.mark.unit
    def test_every_handler_uses_the_formatter(self, settings_factory, restore_root_logger, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        setup_logging(settings_factory(log_format="json", environment="production"))

        assert len(restore_root_logger.handlers) == 3
        for handler in restore_root_logger.handlers:
            assert json.loads(handler.formatter.format(_record("ready")))["event"] == "ready"
        assert (tmp_path / "logs").is_dir()
        for handler in restore_root_logger.handlers[1:]:
            handler.close()


class TestConsoleLogging:
    """Tests for LOG_FORMAT=console"""

    @pytest.mark.unit
    def test_console_format_is_not_json(self):
        line = build_formatter("console").format(_record("Starting Art Visualizer API..."))

        assert "Starting Art Visualizer API..." in line
        with pytest.raises(json.JSONDecodeError):
            json.loads(line)
