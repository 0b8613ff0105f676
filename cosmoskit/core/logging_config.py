"""
Logging infrastructure for cosmoskit.

Every record emitted while a request is in flight carries the activity id
the dispatch layer sent in x-ms-activity-id, so client logs can be matched
against service-side diagnostics. Authorization tokens, account keys and
signatures are redacted from messages and structured context.

Author: Cosmoskit Team
Date: 2026-10-18
"""

import logging
import logging.handlers
import json
import sys
import re
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .config_manager import LoggingConfig

REDACTED = "***REDACTED***"

# Activity id of the request currently being dispatched
activity_id: ContextVar[Optional[str]] = ContextVar('activity_id', default=None)

# Context keys whose values are never logged
SENSITIVE_KEYS = frozenset({"authorization", "auth_token", "master_key", "resource_token"})


class SensitiveDataFilter(logging.Filter):
    """Filter to redact credentials from log messages and context."""

    PATTERNS = [
        (re.compile(r'(Authorization:\s+)(?:Bearer\s+)?\S+', re.IGNORECASE), rf'\1{REDACTED}'),
        (re.compile(r'(authorization["\']?\s*[:=]\s*["\']?)[^\s"\',}]+', re.IGNORECASE), rf'\1{REDACTED}'),
        (re.compile(r'(auth_token["\']?\s*[:=]\s*["\']?)[^\s"\',}]+', re.IGNORECASE), rf'\1{REDACTED}'),
        (re.compile(r'(AccountKey=)[^;]+', re.IGNORECASE), rf'\1{REDACTED}'),
        (re.compile(r'(sig(?:%3d|=))[^;&\s"\']+', re.IGNORECASE), rf'\1{REDACTED}'),
    ]

    @classmethod
    def redact(cls, text: str) -> str:
        for pattern, replacement in cls.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact sensitive data from the record in place."""
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)
        context = getattr(record, "context", None)
        if isinstance(context, dict):
            record.context = {
                key: REDACTED if key.lower() in SENSITIVE_KEYS
                else self.redact(value) if isinstance(value, str)
                else value
                for key, value in context.items()
            }
        return True


class ActivityIdFilter(logging.Filter):
    """Stamp each record with the activity id of the current request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.activity_id = activity_id.get() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }

        if act_id := activity_id.get():
            log_data["activity_id"] = act_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_data["context"] = record.context

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter; the activity id follows the logger name."""

    def __init__(self):
        fmt = "%(asctime)s [%(levelname)s] %(name)s (%(activity_id)s): %(message)s"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "activity_id"):
            record.activity_id = activity_id.get() or "-"
        return super().format(record)


def _build_handler(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    handler.addFilter(ActivityIdFilter())
    handler.addFilter(SensitiveDataFilter())
    return handler


def setup_logging(
    level: str = "INFO",
    format_type: str = "text",
    log_file: Optional[str] = None,
    rotation_size: str = "10MB",
    rotation_count: int = 5,
    module_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    Configure cosmoskit logging.

    Console output goes to stderr so command output on stdout stays
    machine-readable.

    Args:
        level: Default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Log format ("json" or "text")
        log_file: Optional file path for log output
        rotation_size: Size limit for log rotation (e.g., "10MB")
        rotation_count: Number of rotated log files to keep
        module_levels: Optional dict of module-specific log levels
                      e.g., {"cosmoskit.request.client_context": "DEBUG"}
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    formatter = JSONFormatter() if format_type == "json" else TextFormatter()
    root_logger.addHandler(_build_handler(logging.StreamHandler(sys.stderr), formatter))

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=_parse_size(rotation_size),
            backupCount=rotation_count,
            encoding='utf-8'
        )
        root_logger.addHandler(_build_handler(file_handler, formatter))
        root_logger.info(f"Logging to file: {log_file} (rotation: {rotation_size}, count: {rotation_count})")

    for module_name, module_level in (module_levels or {}).items():
        logging.getLogger(module_name).setLevel(getattr(logging, module_level.upper()))

    root_logger.debug(f"Logging configured: level={level}, format={format_type}")


def configure_logging(config: "LoggingConfig") -> None:
    """Apply the logging section of a ClientConfig."""
    setup_logging(
        level=config.level,
        format_type=config.format,
        log_file=config.file,
        rotation_size=config.rotation_size,
        rotation_count=config.rotation_count,
        module_levels=config.module_levels,
    )


def _parse_size(size_str: str) -> int:
    """
    Parse size string to bytes.

    Args:
        size_str: Size string (e.g., "10MB", "1GB")

    Returns:
        Size in bytes
    """
    size_str = size_str.upper().strip()

    # Longer suffixes first so 'B' does not match 'MB'
    multipliers = [
        ('GB', 1024 ** 3),
        ('MB', 1024 ** 2),
        ('KB', 1024),
        ('B', 1),
    ]

    for suffix, multiplier in multipliers:
        if size_str.endswith(suffix):
            number = size_str[:-len(suffix)].strip()
            return int(float(number) * multiplier)

    return int(size_str)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_activity_id(act_id: str) -> Token:
    """Set the activity id for the current context.

    Returns:
        Token that clear_activity_id() uses to restore the previous id
    """
    return activity_id.set(act_id)


def clear_activity_id(token: Optional[Token] = None) -> None:
    """Restore the activity id saved in token, or unset it."""
    if token is not None:
        activity_id.reset(token)
    else:
        activity_id.set(None)


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        **context: Fields rendered under "context" by JSONFormatter
    """
    extra = {"context": context} if context else {}
    logger.log(level, message, extra=extra)
