"""Package categories and their default naming prefixes."""

from enum import Enum

from lintnaming.utils.exceptions import UnknownCategoryError


class PackageCategory(Enum):
    """Kinds of packages whose names follow a prefix convention.

    The member value is the default prefix for the category.
    """

    PLUGIN = "eslint-plugin"
    CONFIG = "eslint-config"
    FORMATTER = "eslint-formatter"

    @property
    def key(self) -> str:
        """Name used for the category in configuration files and the CLI."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> "PackageCategory":
        """Look up a category by its configuration key (case-insensitive)."""
        try:
            return cls[key.strip().upper()]
        except KeyError as e:
            raise UnknownCategoryError(key, original_exception=e) from e


CATEGORY_KEYS = [category.key for category in PackageCategory]

DEFAULT_PREFIXES = {category.key: category.value for category in PackageCategory}
