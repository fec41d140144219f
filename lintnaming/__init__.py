"""
lintnaming - naming helpers for plugin, shareable config and formatter packages.
"""

from lintnaming.categories import PackageCategory
from lintnaming.naming import (
    add_prefix_to_term,
    get_namespace_from_term,
    get_shorthand_name,
    normalize_package_name,
    remove_namespace_from_term,
    remove_prefix_from_term,
)

__version__ = "0.1.0"

__all__ = [
    "PackageCategory",
    "normalize_package_name",
    "get_shorthand_name",
    "remove_prefix_from_term",
    "add_prefix_to_term",
    "get_namespace_from_term",
    "remove_namespace_from_term",
]
