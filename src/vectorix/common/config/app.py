"""
Main application configuration.
"""

from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from .observability import LoggingObservabilityConfig


class AppConfig(BaseSettings):
    """
    Top-level vectorix settings.

    Combines package metadata with the nested logging configuration.
    """

    app_name: str = Field(default="vectorix", description="Application name")

    app_version: str = Field(default="0.1.0", description="Application version")

    environment: str = Field(
        default="development", description="Environment (development, staging, production)"
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingObservabilityConfig = Field(
        default_factory=LoggingObservabilityConfig, description="Logging configuration"
    )

    def model_post_init(self, __context: Any) -> None:  # pylint: disable=arguments-differ
        """Propagate app level settings into the nested configs."""
        if self.debug:
            self.logging.level = "DEBUG"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "AppConfig":
        """
        Build the configuration from environment variables and an optional .env file.

        Args:
            env_file: Path to the .env file (defaults to ``.env`` in the working directory)

        Returns:
            AppConfig instance
        """
        env_file = env_file or ".env"
        return cls(_env_file=env_file, logging=LoggingObservabilityConfig(_env_file=env_file))

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary."""
        return self.model_dump()

    def is_production(self) -> bool:
        """Whether running in production."""
        return self.environment == "production"

    def is_development(self) -> bool:
        """Whether running in development."""
        return self.environment == "development"

    model_config = {
        "env_prefix": "VECTORIX_",
        "env_file": ".env",
        "case_sensitive": False,
        "validate_assignment": True,
        "extra": "ignore",
    }
