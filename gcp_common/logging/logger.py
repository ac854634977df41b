"""
Logging configuration and utilities.
"""

import inspect
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from gcp_common.config import Config


class CloudLoggingJSONFormatter(logging.Formatter):
    """
    Formatter that outputs JSON for Cloud Logging when the message carries structured data.
    Cloud Logging parses JSON from stdout if the line starts with '{'.
    """

    def format(self, record):
        message = record.getMessage()
        if message.strip().startswith("{"):
            try:
                parsed = json.loads(message)
            except (json.JSONDecodeError, ValueError, TypeError):
                parsed = None
            if isinstance(parsed, dict):
                log_entry = {
                    "severity": record.levelname,
                    "message": parsed.get("message", str(message)),
                    "timestamp": datetime.now(timezone.utc)
                    .isoformat()
                    .replace("+00:00", "Z"),
                    "service": Config.SERVICE_NAME,
                    "logger": record.name,
                }
                for key, value in parsed.items():
                    if key != "message":
                        log_entry[key] = value
                if record.exc_info:
                    log_entry["exception"] = self.formatException(record.exc_info)
                return json.dumps(log_entry, default=str)

        return super().format(record)


def setup_logger(
    service_name: Optional[str] = None, log_level: Optional[str] = None
) -> logging.Logger:
    """Setup and configure the root logger for a service."""

    name = service_name or Config.SERVICE_NAME
    level = log_level or Config.LOG_LEVEL

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    formatter = CloudLoggingJSONFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Add console handler if not already present (pytest/uvicorn may have added one)
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) for h in root_logger.handlers
    )
    if not has_console_handler:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger, configuring the root logger on first use."""
    logger = logging.getLogger(name)

    if not logging.getLogger().handlers:
        setup_logger()

    return logger


class StructuredLogger:
    """
    Wrapper around logger that adds structured fields for Google Cloud Logging.
    This allows filtering by fields like topic or subscription in Cloud Logging Explorer.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _format_structured_message(
        self,
        message: str,
        correlation_id: Optional[str] = None,
        **kwargs,
    ) -> str:
        """
        Format message with structured fields for Cloud Logging.

        When any structured field is present the whole entry is rendered as a
        JSON object; CloudLoggingJSONFormatter detects this and emits a proper
        structured log line. Otherwise the plain message is returned.
        """
        formatted_message = message
        if correlation_id:
            formatted_message = f"[{correlation_id}] {message}"

        fields = {key: value for key, value in kwargs.items() if value is not None}
        if correlation_id or fields:
            structured_data: Dict[str, Any] = {"message": formatted_message}
            if correlation_id:
                structured_data["correlation_id"] = correlation_id
            structured_data.update(fields)
            return json.dumps(structured_data, default=str)
        return formatted_message

    def debug(self, message: str, correlation_id: Optional[str] = None, **kwargs):
        """Log debug message with optional structured fields."""
        self.logger.debug(
            self._format_structured_message(message, correlation_id, **kwargs)
        )

    def info(self, message: str, correlation_id: Optional[str] = None, **kwargs):
        """Log info message with optional structured fields."""
        self.logger.info(
            self._format_structured_message(message, correlation_id, **kwargs)
        )

    def warning(self, message: str, correlation_id: Optional[str] = None, **kwargs):
        """Log warning message with optional structured fields."""
        self.logger.warning(
            self._format_structured_message(message, correlation_id, **kwargs)
        )

    def error(
        self,
        message: str,
        correlation_id: Optional[str] = None,
        exc_info: bool = False,
        **kwargs,
    ):
        """Log error message with optional structured fields."""
        self.logger.error(
            self._format_structured_message(message, correlation_id, **kwargs),
            exc_info=exc_info,
        )

    def __getattr__(self, name: str):
        """Delegate other attributes to the underlying logger."""
        return getattr(self.logger, name)


def get_structured_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger.

    Usage:
        logger = get_structured_logger(__name__)
        logger.info("Pulled messages", subscription="orders-sub", count=3)

    In Cloud Logging Explorer, you can then filter by:
        jsonPayload.subscription="orders-sub"
    """
    get_logger(name)
    return StructuredLogger(logging.getLogger(name))


def _caller_logger_name(depth: int = 2) -> str:
    """Resolve the module name of the function calling a log_* helper."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            frame = frame.f_back
        return frame.f_globals.get("__name__", "root")
    finally:
        del frame


def log_debug(
    message: str, correlation_id: str = "", logger_name: Optional[str] = None, **kwargs
):
    """Log a debug message; see log_info."""
    structured_logger = get_structured_logger(logger_name or _caller_logger_name())
    structured_logger.debug(message, correlation_id=correlation_id, **kwargs)


def log_info(
    message: str, correlation_id: str = "", logger_name: Optional[str] = None, **kwargs
):
    """
    Log an info message with optional correlation_id and structured fields.

    Args:
        message: The log message (keep resource names in kwargs, not in the string)
        correlation_id: Correlation id for request tracing (can be empty string)
        logger_name: Optional logger name (defaults to caller's module name)
        **kwargs: Additional structured fields to include in the log (e.g., topic)
    """
    structured_logger = get_structured_logger(logger_name or _caller_logger_name())
    structured_logger.info(message, correlation_id=correlation_id, **kwargs)


def log_warning(
    message: str, correlation_id: str = "", logger_name: Optional[str] = None, **kwargs
):
    """Log a warning message; see log_info."""
    structured_logger = get_structured_logger(logger_name or _caller_logger_name())
    structured_logger.warning(message, correlation_id=correlation_id, **kwargs)


def log_error(
    message: str,
    correlation_id: str = "",
    logger_name: Optional[str] = None,
    exc_info: bool = False,
    **kwargs,
):
    """Log an error message; see log_info. Pass exc_info=True inside except blocks."""
    structured_logger = get_structured_logger(logger_name or _caller_logger_name())
    structured_logger.error(
        message, correlation_id=correlation_id, exc_info=exc_info, **kwargs
    )
