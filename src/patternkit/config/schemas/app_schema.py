"""Main application configuration schema."""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig


class CliConfig(BaseModel):
    """Command line interface configuration."""

    default_format: Literal["json", "yaml", "table"] = Field(
        "table", description="Output format used when --format is not given"
    )


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    cli: CliConfig = Field(default_factory=lambda: CliConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
