"""
Logging configuration settings.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class LoggingObservabilityConfig(BaseSettings):
    """Logging configuration loaded from ``VECTORIX_LOG_*`` variables."""

    level: str = Field(default="INFO", description="Default logging level")

    format: str = Field(default="json", description="Log format (json, text)")

    output: str = Field(default="console", description="Log output (console, file)")

    file_path: str | None = Field(default=None, description="Log file path")

    include_caller: bool = Field(default=False, description="Add caller information to logs")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate the log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Level must be one of {sorted(valid_levels)}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate the log format."""
        valid_formats = {"json", "text"}
        if v not in valid_formats:
            raise ValueError(f"Format must be one of {sorted(valid_formats)}")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: str) -> str:
        """Validate the log output."""
        valid_outputs = {"console", "file"}
        if v not in valid_outputs:
            raise ValueError(f"Output must be one of {sorted(valid_outputs)}")
        return v

    model_config = {"env_prefix": "VECTORIX_LOG_", "extra": "ignore"}
