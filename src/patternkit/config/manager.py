"""Configuration loading for the application."""
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from patternkit.config.env_expansion import expand_env_vars
from patternkit.config.schemas.app_schema import AppConfig, validate_config
from patternkit.exceptions import ConfigurationError

CONFIG_ENV_VAR = "PATTERNKIT_CONFIG"
LOG_LEVEL_ENV_VAR = "PATTERNKIT_LOG_LEVEL"

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Sources, lowest precedence first:
    - schema defaults
    - the YAML or JSON file given explicitly or through PATTERNKIT_CONFIG
    - the PATTERNKIT_LOG_LEVEL environment override

    The file is read lazily on first access and cached.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_ENV_VAR)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    def get_app_config(self) -> AppConfig:
        """
        Get the validated application configuration.

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        with self._lock:
            if self._app_config is None:
                self._app_config = self._build_config()
            return self._app_config

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
            return self.get_app_config()

    def _build_config(self) -> AppConfig:
        data: Dict[str, Any] = {}
        if self._config_file:
            data = expand_env_vars(self._load_file(self._config_file))

        level_override = os.environ.get(LOG_LEVEL_ENV_VAR)
        if level_override:
            logging_section = data.get("logging")
            if logging_section is None:
                data["logging"] = {"level": level_override}
            elif isinstance(logging_section, dict):
                data["logging"] = {**logging_section, "level": level_override}

        try:
            return validate_config(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

    def _load_file(self, config_file: str) -> Dict[str, Any]:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping, got {type(data).__name__}"
            )

        logger.debug("Loaded configuration from %s", config_file)
        return data
