"""
Logging configuration for design_kata.

Provides:
- Colored console output on stderr
- Daily-rotating application log
- Separate audit log for persistence requests
- Per-thread session context on every record
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

LOG_DIR = Path(os.getenv("DESIGN_KATA_LOG_DIR", "logs"))
AUDIT_LOGGER_NAME = "design_kata.audit"

_session_context = threading.local()


class ContextFilter(logging.Filter):
    """Add session ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = getattr(_session_context, "session_id", "N/A")
        return True


class FlushingTimedRotatingFileHandler(logging.handlers.TimedRotatingFileHandler):
    """TimedRotatingFileHandler that flushes after every write."""

    def emit(self, record: logging.LogRecord) -> None:
        super().emit(record)
        self.flush()


class ColoredFormatter(logging.Formatter):
    """Colored console output for development."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        # Format a copy so file handlers sharing the record see the plain level name.
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "line": record.lineno,
            "message": record.getMessage(),
            "session_id": getattr(record, "session_id", None),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def _file_handler(
    filename: str, level: int, backup_count: int
) -> FlushingTimedRotatingFileHandler:
    handler = FlushingTimedRotatingFileHandler(
        LOG_DIR / filename,
        when="midnight",
        interval=1,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.suffix = "%Y-%m-%d"
    handler.addFilter(ContextFilter())
    return handler


def setup_logging(
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    *,
    json_format: bool = False,
) -> None:
    """
    Configure application-wide logging.

    Args:
        console_level: Console output level (DEBUG, INFO, WARNING, ERROR)
        file_level: File output level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON format for the application log file
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        # Only the file handlers installed here are closed.
        if isinstance(handler, FlushingTimedRotatingFileHandler):
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.WARNING))
    console_format = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
    if os.getenv("DESIGN_KATA_NO_COLOR"):
        console_formatter = logging.Formatter(console_format, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        console_formatter = ColoredFormatter(console_format, datefmt="%Y-%m-%d %H:%M:%S")
    console_handler.setFormatter(console_formatter)
    console_handler.addFilter(ContextFilter())
    root_logger.addHandler(console_handler)

    app_handler = _file_handler(
        "design-kata.log", getattr(logging, file_level.upper(), logging.DEBUG), 30
    )
    if json_format:
        app_handler.setFormatter(JSONFormatter())
    else:
        app_format = (
            "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s:%(lineno)d | %(message)s"
        )
        app_handler.setFormatter(logging.Formatter(app_format, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(app_handler)

    audit_handler = _file_handler("design-kata-audit.log", logging.INFO, 365)
    audit_format = "%(asctime)s | %(session_id)s | %(message)s"
    audit_handler.setFormatter(logging.Formatter(audit_format, datefmt="%Y-%m-%d %H:%M:%S"))

    audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    for handler in list(audit_logger.handlers):
        audit_logger.removeHandler(handler)
        handler.close()
    audit_logger.addHandler(audit_handler)
    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False

    root_logger.debug(
        "Logging configured (console=%s, file=%s, json=%s)", console_level, file_level, json_format
    )


def set_session_id(session_id: str) -> None:
    """Set session ID for current thread."""
    _session_context.session_id = session_id


def get_session_id() -> str | None:
    """Get session ID for current thread."""
    return getattr(_session_context, "session_id", None)


def generate_session_id() -> str:
    """Generate unique session ID."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"sess_{timestamp}_{short_uuid}"


def audit_log(message: str, **context: Any) -> None:
    """
    Write to audit log.

    Example:
        audit_log("Journal save requested", filename="notes.txt", overwrite=False)
    """
    logger = logging.getLogger(AUDIT_LOGGER_NAME)
    context_str = " | ".join(f"{k}={v}" for k, v in context.items())
    full_message = f"{message} | {context_str}" if context else message
    logger.info(full_message)
