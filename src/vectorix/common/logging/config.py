"""
Structured logging setup.
"""

import logging as stdlib_logging
import os
import sys
from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import structlog

from ..config.observability import LoggingObservabilityConfig


class LogLevel(Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LoggingConfig:
    """
    Logging configuration.
    """

    level: LogLevel = LogLevel.INFO
    format: str = "json"  # json or text
    output: str = "console"  # console or file
    file_path: Optional[str] = None
    include_caller: bool = False
    cache_logger_on_first_use: bool = True


def configure_structured_logging(
    config: Optional[LoggingConfig] = None,
    observability_config: Optional[LoggingObservabilityConfig] = None,
) -> None:
    """
    Configure structured logging for an application using vectorix.

    The library itself never calls this; it only emits events through
    :func:`vectorix.common.logging.get_logger`.

    Args:
        config: Logging configuration (defaults used when None)
        observability_config: Settings-based logging configuration, takes precedence
    """
    if observability_config is not None:
        config = LoggingConfig(
            level=LogLevel(observability_config.level),
            format=observability_config.format,
            output=observability_config.output,
            file_path=observability_config.file_path,
            include_caller=observability_config.include_caller,
        )
    elif config is None:
        config = LoggingConfig()

    _configure_structlog(config)


def _configure_structlog(config: LoggingConfig) -> None:
    """Configure structlog on top of stdlib logging."""

    if config.output == "file":
        stdlib_logging.basicConfig(
            format="%(message)s",
            filename=config.file_path or "vectorix.log",
            level=getattr(stdlib_logging, config.level.value),
        )
    else:
        stdlib_logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(stdlib_logging, config.level.value),
        )

    processors: list[
        Callable[
            [Any, str, MutableMapping[str, Any]],
            Mapping[str, Any] | str | bytes | bytearray | tuple,
        ]
    ] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if config.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    if config.format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=config.cache_logger_on_first_use,
    )


def get_logging_config_from_env() -> LoggingConfig:
    """
    Read the logging configuration from environment variables.

    Environment variables:
    - VECTORIX_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
    - VECTORIX_LOG_FORMAT: json, text
    - VECTORIX_LOG_OUTPUT: console, file
    - VECTORIX_LOG_FILE_PATH: log file path (when output=file)
    - VECTORIX_LOG_INCLUDE_CALLER: true/false

    Returns:
        LoggingConfig instance
    """
    return LoggingConfig(
        level=LogLevel(os.getenv("VECTORIX_LOG_LEVEL", "INFO").upper()),
        format=os.getenv("VECTORIX_LOG_FORMAT", "json"),
        output=os.getenv("VECTORIX_LOG_OUTPUT", "console"),
        file_path=os.getenv("VECTORIX_LOG_FILE_PATH"),
        include_caller=os.getenv("VECTORIX_LOG_INCLUDE_CALLER", "false").lower() == "true",
    )
