"""Library configuration using Pydantic Settings.

All configuration is loaded from environment variables.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from retrieval_model.exceptions import ConfigurationError


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class MetricsSettings(BaseSettings):
    """Prometheus instrumentation configuration."""

    model_config = SettingsConfigDict(env_prefix="METRICS_")

    enabled: bool = Field(
        default=True,
        description="Record retrieval state and attempt metrics",
    )
    namespace: str = Field(
        default="retrieval",
        description="Prefix for exported metric names",
    )

    @field_validator("namespace")
    @classmethod
    def _valid_namespace(cls, value: str) -> str:
        if not value or not value.replace("_", "").isalnum():
            raise ValueError("namespace must be alphanumeric with underscores")
        return value


class Settings(BaseSettings):
    """Main library settings.

    Aggregates all configuration sections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    metrics: MetricsSettings = Field(default_factory=MetricsSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings.

    Returns:
        Settings instance loaded from environment.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e
