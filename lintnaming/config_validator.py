"""Configuration validation for lintnaming."""

import logging
import re
from typing import Any, Dict, List

from .categories import CATEGORY_KEYS

# Characters that can never appear inside a package name prefix
INVALID_PREFIX_CHARS = re.compile(r"[/@\s]")

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class ConfigValidator:
    """Validates lintnaming configuration."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate complete configuration.

        Args:
            config: Configuration dictionary

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if "naming" not in config:
            errors.append("Missing 'naming' section in configuration")
        elif not isinstance(config["naming"], dict):
            errors.append("'naming' section must be a mapping")
        else:
            errors.extend(self.validate_prefixes(config["naming"].get("prefixes")))

        if "logging" in config:
            errors.extend(self.validate_logging(config["logging"]))

        if errors:
            self.logger.debug("Configuration has %d error(s)", len(errors))
        return errors

    def validate_prefixes(self, prefixes: Any) -> List[str]:
        """Validate the category to prefix mapping.

        Args:
            prefixes: Value of ``naming.prefixes``

        Returns:
            List of validation error messages
        """
        errors = []

        if prefixes is None:
            errors.append("Missing 'prefixes' in naming configuration")
            return errors
        if not isinstance(prefixes, dict):
            errors.append("'prefixes' in naming configuration must be a mapping")
            return errors

        unknown = sorted(str(key) for key in prefixes if key not in CATEGORY_KEYS)
        if unknown:
            errors.append(f"Unknown package categories in prefixes: {', '.join(unknown)}")

        missing = [key for key in CATEGORY_KEYS if key not in prefixes]
        if missing:
            errors.append(f"Missing prefixes for categories: {', '.join(missing)}")

        for key, prefix in prefixes.items():
            if not isinstance(prefix, str):
                errors.append(f"Prefix for '{key}' must be a string")
            elif not prefix:
                errors.append(f"Prefix for '{key}' cannot be empty")
            elif INVALID_PREFIX_CHARS.search(prefix):
                errors.append(
                    f"Prefix for '{key}' cannot contain '/', '@' or whitespace, got {prefix!r}"
                )

        return errors

    def validate_logging(self, logging_config: Any) -> List[str]:
        """Validate the logging section."""
        if not isinstance(logging_config, dict):
            return ["'logging' section must be a mapping"]

        level = logging_config.get("level")
        if level is not None and str(level).upper() not in LOG_LEVELS:
            return [f"Invalid logging level: {level}"]
        return []
