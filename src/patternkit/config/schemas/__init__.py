"""Configuration schemas."""

from patternkit.config.schemas.app_schema import AppConfig, CliConfig, validate_config
from patternkit.config.schemas.logging_schema import LoggingConfig

__all__ = ["AppConfig", "CliConfig", "LoggingConfig", "validate_config"]
