"""Configuration package."""

from patternkit.config.schemas import AppConfig, CliConfig, LoggingConfig
from patternkit.config.manager import ConfigurationManager

__all__ = ["AppConfig", "CliConfig", "LoggingConfig", "ConfigurationManager"]
