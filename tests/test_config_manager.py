"""Test configuration loading and discovery."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
import yaml

from lintnaming.core.config_manager import LOCAL_CONFIG_FILE, ConfigManager
from lintnaming.utils.exceptions import ConfigurationError


@pytest.fixture
def manager():
    return ConfigManager()


@pytest.fixture
def empty_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestConfigManager:
    """Test the ConfigManager class."""

    def test_package_default_config(self, manager):
        config = manager.load_package_default_config()

        assert config["naming"]["prefixes"] == {
            "plugin": "eslint-plugin",
            "config": "eslint-config",
            "formatter": "eslint-formatter",
        }
        assert config["logging"]["level"] == "WARNING"

    def test_discover_falls_back_to_default(self, manager, empty_cwd):
        assert manager.discover_and_load_config(None) == manager.load_package_default_config()

    def test_discover_config_argument(self, manager, empty_cwd):
        path = empty_cwd / "custom.yaml"
        path.write_text(yaml.safe_dump({"naming": {"prefixes": {"plugin": "acme-plugin"}}}))

        config = manager.discover_and_load_config(str(path))

        assert config["naming"]["prefixes"]["plugin"] == "acme-plugin"
        assert config["naming"]["prefixes"]["config"] == "eslint-config"
        assert config["logging"]["level"] == "WARNING"

    def test_discover_missing_config_argument(self, manager, empty_cwd):
        with pytest.raises(ConfigurationError) as exc_info:
            manager.discover_and_load_config(str(empty_cwd / "missing.yaml"))

        assert "Configuration file not found" in str(exc_info.value)

    def test_discover_local_config_file(self, manager, empty_cwd):
        (empty_cwd / LOCAL_CONFIG_FILE).write_text("logging:\n  level: DEBUG\n")

        config = manager.discover_and_load_config(None)

        assert config["logging"]["level"] == "DEBUG"
        assert config["naming"]["prefixes"]["plugin"] == "eslint-plugin"

    def test_config_argument_wins_over_local_file(self, manager, empty_cwd):
        (empty_cwd / LOCAL_CONFIG_FILE).write_text("logging:\n  level: DEBUG\n")
        path = empty_cwd / "custom.yaml"
        path.write_text("logging:\n  level: ERROR\n")

        config = manager.discover_and_load_config(str(path))

        assert config["logging"]["level"] == "ERROR"

    def test_empty_config_file(self, manager, empty_cwd):
        path = empty_cwd / "empty.yaml"
        path.write_text("")

        assert manager.load_config(str(path)) == {}
        assert manager.discover_and_load_config(str(path)) == manager.load_package_default_config()

    def test_invalid_yaml(self, manager, empty_cwd):
        path = empty_cwd / "broken.yaml"
        path.write_text("naming: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_config(str(path))

        assert isinstance(exc_info.value.original_exception, yaml.YAMLError)
        assert exc_info.value.path == str(path)

    def test_non_mapping_yaml(self, manager, empty_cwd):
        path = empty_cwd / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_config(str(path))

        assert "must contain a mapping" in str(exc_info.value)

    def test_deep_merge(self, manager):
        default = {"a": {"b": 1, "c": 2}, "d": 3}
        user = {"a": {"c": 20}, "e": 5}

        assert manager.deep_merge(default, user) == {"a": {"b": 1, "c": 20}, "d": 3, "e": 5}
        assert default == {"a": {"b": 1, "c": 2}, "d": 3}

    def test_merge_config_and_args(self, manager):
        config = {"logging": {"level": "WARNING"}}

        assert manager.merge_config_and_args(config, None)["logging"]["level"] == "WARNING"
        assert manager.merge_config_and_args(config, "DEBUG")["logging"]["level"] == "DEBUG"
        assert manager.merge_config_and_args({}, "INFO") == {"logging": {"level": "INFO"}}
