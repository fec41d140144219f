"""
Utility modules for lintnaming.

Holds the exception classes shared by the configuration, resolver and CLI
layers.
"""

from lintnaming.utils.exceptions import (
    ConfigurationError,
    NamingError,
    UnknownCategoryError,
)

__all__ = [
    "NamingError",
    "UnknownCategoryError",
    "ConfigurationError",
]
