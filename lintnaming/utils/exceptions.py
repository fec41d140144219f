"""
Exception classes for lintnaming.

The naming functions themselves never raise; these exceptions cover the
layers around them (category lookup and configuration loading).

Each exception includes:
- Clear error message
- Suggested user action
- Original exception preserved for debugging
"""

from typing import Optional


class NamingError(Exception):
    """
    Base exception for all lintnaming errors.
    """

    def __init__(
        self,
        message: str,
        suggested_action: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize NamingError.

        Args:
            message: Human-readable error message
            suggested_action: Suggested action for the user to resolve the issue
            original_exception: The original exception that was caught
        """
        self.message = message
        self.suggested_action = suggested_action
        self.original_exception = original_exception

        error_parts = [message]

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class UnknownCategoryError(NamingError):
    """
    Raised when a package category key is not one of the known categories.
    """

    def __init__(
        self,
        category: str,
        original_exception: Optional[Exception] = None,
    ):
        # local import, categories imports this module
        from lintnaming.categories import CATEGORY_KEYS

        self.category = category

        super().__init__(
            message=f"Unknown package category: {category!r}",
            suggested_action=f"Use one of: {', '.join(CATEGORY_KEYS)}",
            original_exception=original_exception,
        )


class ConfigurationError(NamingError):
    """
    Raised when a configuration file is missing or cannot be parsed.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Human-readable error message
            path: Configuration file involved, if any
            original_exception: The original parsing or I/O exception
        """
        self.path = path

        suggested_action = "Check the configuration file"
        if path:
            suggested_action += f" at {path}"

        super().__init__(
            message=message,
            suggested_action=suggested_action,
            original_exception=original_exception,
        )


__all__ = [
    "NamingError",
    "UnknownCategoryError",
    "ConfigurationError",
]
