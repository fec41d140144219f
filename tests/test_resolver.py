"""Test the NameResolver service."""

import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from lintnaming.categories import PackageCategory
from lintnaming.core.resolver import NameResolver
from lintnaming.utils.exceptions import ConfigurationError, UnknownCategoryError


class TestNameResolver:
    """Test the NameResolver class."""

    def test_default_prefixes(self):
        resolver = NameResolver()

        assert resolver.prefix_for("plugin") == "eslint-plugin"
        assert resolver.prefix_for(PackageCategory.CONFIG) == "eslint-config"
        assert resolver.prefix_for("Formatter") == "eslint-formatter"

    def test_configured_prefix_overrides_default(self):
        resolver = NameResolver({"naming": {"prefixes": {"plugin": "acme-plugin"}}})

        assert resolver.prefix_for(PackageCategory.PLUGIN) == "acme-plugin"
        assert resolver.prefix_for("config") == "eslint-config"

    def test_unknown_category(self):
        resolver = NameResolver()

        with pytest.raises(UnknownCategoryError):
            resolver.prefix_for("parser")

    def test_normalize(self):
        resolver = NameResolver()

        assert resolver.normalize("react", "plugin") == "eslint-plugin-react"
        assert resolver.normalize("@scope", "config") == "@scope/eslint-config"
        assert resolver.normalize("@scope/pretty", PackageCategory.FORMATTER) == "@scope/eslint-formatter-pretty"

    def test_normalize_logs_at_debug(self, caplog):
        resolver = NameResolver()

        with caplog.at_level(logging.DEBUG):
            resolver.normalize("react", "plugin")

        assert "Normalized 'react' to 'eslint-plugin-react'" in caplog.text

    def test_shorthand(self):
        resolver = NameResolver({"naming": {"prefixes": {"plugin": "acme-plugin"}}})

        assert resolver.shorthand("acme-plugin-foo", "plugin") == "foo"
        assert resolver.shorthand("@scope/acme-plugin", "plugin") == "@scope"
        assert resolver.shorthand("eslint-plugin-foo", "plugin") == "eslint-plugin-foo"

    def test_split(self):
        resolver = NameResolver()

        assert resolver.split("@scope/foo") == ("@scope/", "foo")
        assert resolver.split("foo") == ("", "foo")

    def test_log_level(self):
        assert NameResolver().log_level == "WARNING"
        assert NameResolver({"logging": {"level": "debug"}}).log_level == "DEBUG"

    def test_from_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "custom.yaml"
        path.write_text("naming:\n  prefixes:\n    formatter: acme-formatter\n")

        resolver = NameResolver.from_config_file(str(path), log_level="INFO")

        assert resolver.normalize("table", "formatter") == "acme-formatter-table"
        assert resolver.log_level == "INFO"

    def test_from_invalid_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "custom.yaml"
        path.write_text("naming:\n  prefixes:\n    plugin: ''\n")

        with pytest.raises(ConfigurationError) as exc_info:
            NameResolver.from_config_file(str(path))

        assert "Prefix for 'plugin' cannot be empty" in str(exc_info.value)
