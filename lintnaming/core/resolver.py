"""
Name resolver service for lintnaming.

Resolves package categories to their configured prefixes and applies the
naming helpers with them.
"""
import logging
from typing import Optional, Tuple, Union

from lintnaming.categories import DEFAULT_PREFIXES, PackageCategory
from lintnaming.config_validator import ConfigValidator
from lintnaming.core.config_manager import ConfigManager
from lintnaming.naming import (
    get_namespace_from_term,
    get_shorthand_name,
    normalize_package_name,
    remove_namespace_from_term,
)
from lintnaming.utils.exceptions import ConfigurationError

Category = Union[str, PackageCategory]


class NameResolver:
    """Applies the naming rules using prefixes taken from configuration."""

    def __init__(self, config: Optional[dict] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        config = config or {}
        self.config = config
        configured = (config.get("naming") or {}).get("prefixes") or {}
        self.prefixes = {**DEFAULT_PREFIXES, **configured}

    @classmethod
    def from_config_file(
        cls, config_path: Optional[str] = None, log_level: Optional[str] = None
    ) -> "NameResolver":
        """Build a resolver from the discovered configuration.

        Raises:
            ConfigurationError: If the configuration cannot be loaded or fails
                validation.
        """
        config_manager = ConfigManager()
        config = config_manager.discover_and_load_config(config_path)
        config = config_manager.merge_config_and_args(config, log_level)
        errors = ConfigValidator().validate_config(config)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(errors)}", path=config_path
            )
        return cls(config)

    def prefix_for(self, category: Category) -> str:
        """Return the configured prefix for a category or category key."""
        if not isinstance(category, PackageCategory):
            category = PackageCategory.from_key(category)
        return self.prefixes[category.key]

    def normalize(self, name: str, category: Category) -> str:
        """Return the full package name for ``name`` in ``category``."""
        prefix = self.prefix_for(category)
        normalized = normalize_package_name(name, prefix)
        self.logger.debug("Normalized %r to %r (prefix %r)", name, normalized, prefix)
        return normalized

    def shorthand(self, name: str, category: Category) -> str:
        """Return the short display name for ``name`` in ``category``."""
        prefix = self.prefix_for(category)
        short = get_shorthand_name(name, prefix)
        self.logger.debug("Shortened %r to %r (prefix %r)", name, short, prefix)
        return short

    def split(self, term: str) -> Tuple[str, str]:
        """Split a term into its namespace and the name without it."""
        namespace, bare_name = get_namespace_from_term(term), remove_namespace_from_term(term)
        self.logger.debug("Split %r into namespace %r and name %r", term, namespace, bare_name)
        return namespace, bare_name

    @property
    def log_level(self) -> str:
        """Logging level name from the ``logging`` section of the config."""
        return str((self.config.get("logging") or {}).get("level", "WARNING")).upper()
