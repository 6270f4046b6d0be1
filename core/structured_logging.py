"""
Structured Logging with Run Correlation
=======================================

Provides JSON-structured logging with a run id for tracing one consensus or
grading run across every module it touches.

Features:
1. JSON log format for production (parseable by log aggregators)
2. Run correlation via a context variable (safe across asyncio tasks)
3. Plain text format for operators at a terminal

Usage:
    from core.structured_logging import configure_structured_logging, run_context

    configure_structured_logging()

    with run_context():
        logger = logging.getLogger(__name__)
        logger.info("Consensus built", extra={"sport": "NBA", "consensus": 12})
        # Output: {"timestamp": "...", "level": "INFO", "message": "Consensus built",
        #          "run_id": "run-xxx", "sport": "NBA", "consensus": 12}
"""

import json
import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional

from env_config import Config

_run_id_ctx: ContextVar[Optional[str]] = ContextVar("run_id", default=None)


def get_run_id() -> Optional[str]:
    """Get the current run ID from context."""
    return _run_id_ctx.get()


def generate_run_id() -> str:
    """Generate a new run ID."""
    return f"run-{uuid.uuid4().hex[:12]}"


@contextmanager
def run_context(run_id: Optional[str] = None) -> Iterator[str]:
    """Bind a run id for the duration of the block and restore the previous one."""
    token = _run_id_ctx.set(run_id or generate_run_id())
    try:
        yield _run_id_ctx.get()
    finally:
        _run_id_ctx.reset(token)


class JSONFormatter(logging.Formatter):
    """
    JSON log formatter with run correlation.

    Output format:
    {
        "timestamp": "2026-02-13T10:30:45.123456+00:00",
        "level": "INFO",
        "logger": "consensus_engine",
        "message": "Consensus built",
        "run_id": "run-abc123def456",
        "module": "consensus_engine",
        "function": "build_consensus",
        "line": 212,
        ... extra fields ...
    }
    """

    # Fields to exclude from extra (already handled or internal)
    EXCLUDE_FIELDS = {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    }

    def __init__(self, include_version: bool = True):
        super().__init__()
        self.include_version = include_version

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        run_id = get_run_id()
        if run_id:
            log_entry["run_id"] = run_id

        log_entry["module"] = record.module
        log_entry["function"] = record.funcName
        log_entry["line"] = record.lineno

        if self.include_version:
            log_entry["engine_version"] = Config.ENGINE_VERSION

        for key, value in record.__dict__.items():
            if key not in self.EXCLUDE_FIELDS and not key.startswith("_"):
                log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """
    Human-readable text formatter with run correlation.

    Output format:
    2026-02-13 10:30:45.123 [INFO] [run-abc123] consensus_engine:build_consensus:212 - Consensus built
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        run_id = get_run_id() or "-"

        base = f"{timestamp} [{record.levelname}] [{run_id}] {record.name}:{record.funcName}:{record.lineno} - {record.getMessage()}"

        if record.exc_info:
            base += f"\n{self.formatException(record.exc_info)}"

        return base


def configure_structured_logging(
    level: Optional[str] = None,
    format_type: Optional[str] = None,
    stream=None,
) -> None:
    """
    Configure structured logging for the process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to Config.LOG_LEVEL.
        format_type: "json" or "text". Defaults to Config.LOG_FORMAT.
        stream: Output stream, stderr by default so stdout stays clean for JSON reports.

    Call once at startup, before any logging occurs.
    """
    level = (level or Config.LOG_LEVEL).upper()
    format_type = format_type or Config.LOG_FORMAT

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)

    if format_type.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root_logger.addHandler(handler)

    # Suppress noisy third-party loggers
    for noisy_logger in ["httpx", "httpcore", "asyncio"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """
    Log a message with additional context fields.

    Example:
        log_with_context(logger, logging.INFO, "Source fetched",
                         source="covers", picks=41)
    """
    logger.log(level, message, extra=extra)
