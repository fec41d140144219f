"""CLI command implementations."""
from typing import Optional

import typer

from lintnaming.core.logging_config import configure_logging
from lintnaming.core.resolver import NameResolver
from lintnaming.rich_utils.ui_helpers import get_console
from lintnaming.utils.exceptions import NamingError

# Exit code for usage and configuration errors
EXIT_USAGE_ERROR = 2


def is_verbose(ctx: typer.Context) -> bool:
    """Whether the global --verbose flag was given."""
    return bool(ctx.obj and ctx.obj.get("verbose"))


def setup_logging(ctx: typer.Context) -> Optional[str]:
    """Configure logging from the --verbose flag, before any config is read.

    Returns the level override to pass on to the configuration, if any.
    """
    if is_verbose(ctx):
        configure_logging("DEBUG")
        return "DEBUG"
    configure_logging("WARNING")
    return None


def load_resolver(ctx: typer.Context, config_path: Optional[str]) -> NameResolver:
    """Build the resolver for a command and configure logging from it.

    Prints the error and exits when the configuration cannot be used.
    """
    log_level = setup_logging(ctx)
    try:
        resolver = NameResolver.from_config_file(config_path, log_level)
    except NamingError as e:
        fail(e)
    configure_logging(resolver.log_level)
    return resolver


def fail(error: NamingError):
    """Print an error to stderr and exit with the usage error code."""
    get_console(stderr=True).print(f"Error: {error}", markup=False)
    raise typer.Exit(code=EXIT_USAGE_ERROR)
