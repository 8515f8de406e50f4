"""Logging for the Tether SDK.

SDK modules log through ``get_logger(__name__)`` under the ``tether_sdk``
logger, which carries a ``NullHandler`` until ``setup_logging`` is called.
"""

import json
import logging
import logging.handlers
import sys
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "msecs",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class LogLevel(str, Enum):
    """Valid log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: LogLevel = Field(default=LogLevel.WARNING, description="Level of the SDK logger")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log messages",
    )
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_path: Path | None = Field(default=None, description="Log file path")
    max_bytes: int = Field(
        default=10_485_760,  # 10MB
        ge=1_048_576,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(default=5, ge=1, description="Number of backup log files to keep")
    json_format: bool = Field(
        default=False,
        description="Use JSON format for structured logging",
    )

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, v: Path | None) -> Path | None:
        """Ensure file path directory exists."""
        if v is not None:
            v.parent.mkdir(parents=True, exist_ok=True)
        return v


class StructuredFormatter(logging.Formatter):
    """Formats records as one JSON object per line, extras included."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


SDK_LOGGER_NAME = "tether_sdk"


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Attach handlers to the SDK's ``tether_sdk`` logger.

    Only the SDK logger is touched, so an embedding application keeps
    control of the root logger. Records stop at the SDK logger once it has
    handlers of its own. Calling this again replaces the handlers it added.

    Args:
        config: Logging configuration. If None, uses defaults.

    Returns:
        The configured SDK logger
    """
    if config is None:
        config = LoggingConfig()

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    for handler in sdk_logger.handlers:
        handler.close()
    sdk_logger.handlers.clear()
    sdk_logger.setLevel(config.level.value)

    if config.json_format:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        sdk_logger.addHandler(console_handler)

    if config.file_enabled and config.file_path:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        sdk_logger.addHandler(file_handler)

    if sdk_logger.handlers:
        sdk_logger.propagate = False
    else:
        sdk_logger.addHandler(logging.NullHandler())
        sdk_logger.propagate = True

    sdk_logger.debug("Logging configured", extra={"config": config.model_dump(mode="json")})
    return sdk_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
