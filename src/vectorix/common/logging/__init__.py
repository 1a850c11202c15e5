"""
Logging utilities and setup.
"""

from .config import (
    LoggingConfig,
    LogLevel,
    configure_structured_logging,
    get_logging_config_from_env,
)
from .logger import get_logger

__all__ = [
    "configure_structured_logging",
    "get_logging_config_from_env",
    "get_logger",
    "LogLevel",
    "LoggingConfig",
]
