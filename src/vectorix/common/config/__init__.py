"""
Configuration management built on pydantic-settings.
"""

from .app import AppConfig
from .observability import LoggingObservabilityConfig

__all__ = [
    "AppConfig",
    "LoggingObservabilityConfig",
]
