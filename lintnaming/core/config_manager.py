"""
Configuration management for lintnaming.

Handles loading, merging, and discovery of configuration files.
"""
import importlib.resources as importlib_resources
import logging
import os
from typing import Optional

import yaml

from lintnaming.utils.exceptions import ConfigurationError

LOCAL_CONFIG_FILE = "lintnaming.config.yaml"


class ConfigManager:
    """Manages lintnaming configuration loading and merging operations."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {path}", path=path, original_exception=e
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file {path}", path=path, original_exception=e
            ) from e

        # An empty file is an empty override
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping, got {type(data).__name__}",
                path=path,
            )
        return data

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        import lintnaming.config

        default_config_path = importlib_resources.files(lintnaming.config) / "default.yaml"
        with default_config_path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with simple priority order."""
        default_config = self.load_package_default_config()

        # Priority 1: --config argument
        if config_arg:
            if not os.path.exists(config_arg):
                raise ConfigurationError(
                    f"Configuration file not found: {config_arg}", path=config_arg
                )
            self.logger.debug("Using configuration file %s", config_arg)
            return self.deep_merge(default_config, self.load_config(config_arg))

        # Priority 2: lintnaming.config.yaml in current directory
        if os.path.exists(LOCAL_CONFIG_FILE):
            self.logger.debug("Using configuration file %s", LOCAL_CONFIG_FILE)
            return self.deep_merge(default_config, self.load_config(LOCAL_CONFIG_FILE))

        # Priority 3: Package default config
        self.logger.debug("Using packaged default configuration")
        return default_config

    def merge_config_and_args(self, config: dict, log_level: Optional[str]) -> dict:
        """Merge configuration with CLI arguments."""
        if log_level is not None:
            config.setdefault("logging", {})["level"] = log_level
        return config
