"""
TEST_STRUCTURED_LOGGING.PY - Tests for Structured Logging
==========================================================

Tests verify:
1. Run ID generation and context
2. JSON log format structure
3. Text format for terminals
4. configure_structured_logging wiring
5. Env-driven config helpers

Run with: python -m pytest tests/test_structured_logging.py -v
"""

import io
import json
import logging

import pytest

from core.structured_logging import (
    JSONFormatter,
    TextFormatter,
    configure_structured_logging,
    generate_run_id,
    get_run_id,
    log_with_context,
    run_context,
)
from env_config import Config, get_env, get_env_bool, get_env_int


def make_record(msg="Test message", lineno=42):
    return logging.LogRecord(
        name="test_logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=lineno,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestRunIdContext:
    """Tests for run ID context management."""

    def test_generate_run_id_format(self):
        """Run IDs should have run- prefix and 12 hex chars."""
        run_id = generate_run_id()
        assert run_id.startswith("run-")
        assert len(run_id) == 16

    def test_no_run_id_outside_context(self):
        assert get_run_id() is None

    def test_run_context_restores_previous(self):
        with run_context("run-outer") as outer:
            assert outer == "run-outer"
            with run_context() as inner:
                assert inner.startswith("run-")
                assert get_run_id() == inner
            assert get_run_id() == "run-outer"
        assert get_run_id() is None


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_json_format_structure(self):
        parsed = json.loads(JSONFormatter(include_version=False).format(make_record()))
        assert "timestamp" in parsed
        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "test_logger"
        assert parsed["message"] == "Test message"
        assert parsed["line"] == 42
        assert "engine_version" not in parsed

    def test_engine_version_included(self):
        parsed = json.loads(JSONFormatter().format(make_record()))
        assert parsed["engine_version"] == Config.ENGINE_VERSION

    def test_run_id_when_set(self):
        with run_context("run-abc123def456"):
            parsed = json.loads(JSONFormatter().format(make_record()))
        assert parsed["run_id"] == "run-abc123def456"

    def test_no_run_id_when_not_set(self):
        parsed = json.loads(JSONFormatter().format(make_record()))
        assert "run_id" not in parsed

    def test_extra_fields(self):
        record = make_record("Consensus built")
        record.sport = "NBA"
        record.consensus = 12
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["sport"] == "NBA"
        assert parsed["consensus"] == 12


class TestTextFormatter:
    def test_text_format_structure(self):
        record = make_record()
        record.funcName = "build_consensus"
        with run_context("run-test123456"):
            output = TextFormatter().format(record)
        assert "[INFO]" in output
        assert "[run-test123456]" in output
        assert "test_logger:build_consensus:42" in output
        assert output.endswith("Test message")


class TestConfigure:
    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_to_stream(self):
        stream = io.StringIO()
        configure_structured_logging(level="DEBUG", format_type="json", stream=stream)
        log_with_context(logging.getLogger("consensus_engine"), logging.INFO,
                         "Source fetched", source="covers", picks=41)
        entry = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert entry["message"] == "Source fetched"
        assert entry["source"] == "covers"
        assert entry["picks"] == 41

    def test_text_and_level(self):
        stream = io.StringIO()
        configure_structured_logging(level="WARNING", format_type="text", stream=stream)
        logging.getLogger("pick_filter").info("hidden")
        logging.getLogger("pick_filter").warning("shown")
        output = stream.getvalue()
        assert "hidden" not in output
        assert "[WARNING]" in output

    def test_noisy_loggers_quieted(self):
        configure_structured_logging(level="DEBUG", stream=io.StringIO())
        assert logging.getLogger("httpx").level == logging.WARNING


class TestEnvConfig:
    def test_get_env_fallback_names(self, monkeypatch):
        monkeypatch.delenv("PRIMARY_X", raising=False)
        monkeypatch.setenv("SECONDARY_X", " value ")
        assert get_env("PRIMARY_X", "SECONDARY_X") == "value"
        assert get_env("PRIMARY_X", default="d") == "d"

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("off", False), ("junk", None)])
    def test_get_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("FLAG_X", raw)
        default = object()
        result = get_env_bool("FLAG_X", default=default)
        assert result is (default if expected is None else expected)

    def test_get_env_int(self, monkeypatch):
        monkeypatch.setenv("INT_X", "45")
        assert get_env_int("INT_X", 10) == 45
        monkeypatch.setenv("INT_X", "forty")
        assert get_env_int("INT_X", 10) == 10

    def test_defaults(self):
        assert Config.MIN_CAPPERS >= 2
        assert Config.ENGINE_VERSION == "1.4"
        status = Config.log_status()
        assert status["min_cappers"] == Config.MIN_CAPPERS
