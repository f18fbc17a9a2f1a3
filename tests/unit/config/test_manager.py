"""Tests for the configuration manager."""

import json
import os
from unittest.mock import patch

import pytest

from patternkit.config.manager import ConfigurationManager
from patternkit.exceptions import ConfigurationError


class TestConfigurationManager:
    """Test configuration loading."""

    def test_defaults_without_file(self):
        """Test defaults are used when no file is configured."""
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigurationManager()
            config = manager.get_app_config()
        assert manager.config_file is None
        assert config.logging.level == "WARNING"

    def test_load_yaml(self, tmp_path):
        """Test loading a YAML file."""
        config_file = tmp_path / "config.yml"
        config_file.write_text("logging:\n  level: debug\ncli:\n  default_format: json\n")

        config = ConfigurationManager(str(config_file)).get_app_config()
        assert config.logging.level == "DEBUG"
        assert config.cli.default_format == "json"

    def test_load_json(self, tmp_path):
        """Test loading a JSON file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"cli": {"default_format": "yaml"}}))

        config = ConfigurationManager(str(config_file)).get_app_config()
        assert config.cli.default_format == "yaml"

    def test_empty_yaml_uses_defaults(self, tmp_path):
        """Test an empty file is treated as an empty mapping."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert ConfigurationManager(str(config_file)).get_app_config().cli.default_format == "table"

    def test_env_var_selects_file(self, tmp_path):
        """Test PATTERNKIT_CONFIG is used when no file is passed."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("cli:\n  default_format: json\n")

        with patch.dict(os.environ, {"PATTERNKIT_CONFIG": str(config_file)}):
            manager = ConfigurationManager()
            assert manager.config_file == str(config_file)
            assert manager.get_app_config().cli.default_format == "json"

    def test_env_expansion_in_values(self, tmp_path):
        """Test environment references inside the file are expanded."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  file_path: $LOG_ROOT/app.log\n")

        with patch.dict(os.environ, {"LOG_ROOT": "/var/log/patternkit"}):
            config = ConfigurationManager(str(config_file)).get_app_config()
        assert config.logging.file_path == "/var/log/patternkit/app.log"

    def test_log_level_override(self, tmp_path):
        """Test PATTERNKIT_LOG_LEVEL wins over the file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: error\n")

        with patch.dict(os.environ, {"PATTERNKIT_LOG_LEVEL": "debug"}):
            config = ConfigurationManager(str(config_file)).get_app_config()
        assert config.logging.level == "DEBUG"

    def test_config_is_cached_until_reload(self, tmp_path):
        """Test the file is read once and reload picks up changes."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("cli:\n  default_format: json\n")
        manager = ConfigurationManager(str(config_file))
        first = manager.get_app_config()

        config_file.write_text("cli:\n  default_format: yaml\n")
        assert manager.get_app_config() is first
        assert manager.reload().cli.default_format == "yaml"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            ConfigurationManager(str(tmp_path / "missing.yaml")).get_app_config()

    def test_malformed_file(self, tmp_path):
        """Test a parse error raises ConfigurationError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigurationManager(str(config_file)).get_app_config()

    def test_non_mapping_file(self, tmp_path):
        """Test a file holding a list is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- one\n- two\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigurationManager(str(config_file)).get_app_config()

    def test_invalid_values(self, tmp_path):
        """Test schema violations raise ConfigurationError with details."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: loud\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
            ConfigurationManager(str(config_file)).get_app_config()
        assert exc_info.value.details

    def test_scalar_logging_section_with_level_override(self, tmp_path):
        """Test a non-mapping logging section is rejected, not merged, when the level is overridden."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging: verbose\n")

        with patch.dict(os.environ, {"PATTERNKIT_LOG_LEVEL": "DEBUG"}):
            with pytest.raises(ConfigurationError, match="Invalid configuration"):
                ConfigurationManager(str(config_file)).get_app_config()

    def test_log_level_override_without_logging_section(self, tmp_path):
        """Test the override creates the logging section when the file has none."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\ncli:\n  default_format: json\n")

        with patch.dict(os.environ, {"PATTERNKIT_LOG_LEVEL": "error"}):
            config = ConfigurationManager(str(config_file)).get_app_config()
        assert config.logging.level == "ERROR"
