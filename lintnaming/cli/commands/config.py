"""
Config command implementation.

Loads the discovered configuration and reports validation errors.
"""
from typing import Optional

import typer

from lintnaming.cli.commands import fail, setup_logging
from lintnaming.config_validator import ConfigValidator
from lintnaming.core.config_manager import ConfigManager
from lintnaming.core.logging_config import configure_logging
from lintnaming.rich_utils.ui_helpers import get_console
from lintnaming.utils.exceptions import NamingError


def check_config_command(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
):
    """Validate the lintnaming configuration."""
    log_level = setup_logging(ctx)
    console = get_console()
    config_manager = ConfigManager()
    try:
        config = config_manager.discover_and_load_config(config_path)
    except NamingError as e:
        fail(e)

    errors = ConfigValidator().validate_config(config)
    if errors:
        console.print("Configuration is invalid:", markup=False)
        for error in errors:
            console.print(f"  - {error}", markup=False, soft_wrap=True)
        raise typer.Exit(code=1)

    config = config_manager.merge_config_and_args(config, log_level)
    configure_logging(str((config.get("logging") or {}).get("level", "WARNING")).upper())
    console.print("Configuration is valid", markup=False)
