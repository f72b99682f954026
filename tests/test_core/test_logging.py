"""Tests for logging setup."""

import io
import json
import logging

import structlog

from entry_evaluator.config.models import LoggingConfig
from entry_evaluator.core.logging import (
    format_timestamp_ms,
    setup_logging,
    setup_logging_from_config,
)
from entry_evaluator.core.structlog_logger import (
    StructlogMixin,
    debug_enabled,
    get_struct_logger,
)


class TestSetupLogging:
    def test_console_output_goes_to_given_stream(self):
        stream = io.StringIO()
        setup_logging(log_level_name="INFO", stream=stream)

        structlog.get_logger("test").info("entry_evaluated", entry="a.py")

        output = stream.getvalue()
        assert "entry_evaluated" in output
        assert "a.py" in output

    def test_level_filters_records(self):
        stream = io.StringIO()
        setup_logging(log_level_name="WARNING", stream=stream)

        structlog.get_logger("test").info("hidden_event")

        assert "hidden_event" not in stream.getvalue()
        assert not debug_enabled()

    def test_json_console_logs(self):
        stream = io.StringIO()
        setup_logging(json_logs=True, log_level_name="INFO", stream=stream)

        structlog.get_logger("test").warning("json_event", count=2)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "json_event"
        assert record["count"] == 2
        assert record["level"] == "warning"

    def test_log_file_receives_json_lines(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        setup_logging(log_level_name="DEBUG", log_file=log_file, stream=io.StringIO())

        structlog.get_logger("test").debug("file_event", entry="b.py")
        logging.getLogger("stdlib").info("plain %s", "record")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        events = [line["event"] for line in lines]
        assert "file_event" in events
        assert "plain record" in events
        assert debug_enabled()

    def test_from_config(self):
        config = LoggingConfig(level="debug", format="json", file_path=None)

        setup_logging_from_config(config)

        assert logging.getLogger().level == logging.DEBUG


class TestFormatTimestampMs:
    def test_trims_microseconds(self):
        event = {"timestamp_raw": "12:00:00.123456"}

        assert format_timestamp_ms(None, "info", event) == {
            "timestamp": "12:00:00.123"
        }

    def test_without_raw_timestamp(self):
        assert format_timestamp_ms(None, "info", {"event": "x"}) == {"event": "x"}


class TestStructlogMixin:
    def test_logger_bound_with_service_name(self):
        stream = io.StringIO()
        setup_logging(json_logs=True, log_level_name="INFO", stream=stream)

        class Service(StructlogMixin):
            pass

        service = Service()
        service.log_operation("render", destination="index.html").info("started")
        service.log_error_with_context("failed", ValueError("bad"), entry="a.py")

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert records[0]["service"] == "Service"
        assert records[0]["operation"] == "render"
        assert records[0]["destination"] == "index.html"
        assert records[1]["error"] == "bad"
        assert records[1]["error_type"] == "ValueError"

    def test_get_struct_logger(self):
        assert get_struct_logger("x") is not None
