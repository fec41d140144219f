"""
Main CLI application for lintnaming.

Defines the Typer application structure and command routing. Commands are
thin wrappers around NameResolver.
"""
import typer

from lintnaming.cli.commands.config import check_config_command
from lintnaming.cli.commands.naming import (
    namespace_command,
    normalize_command,
    shorthand_command,
)


# Initialize Typer app
app = typer.Typer(help="lintnaming - package name normalization for plugins, configs and formatters")

# Register commands
app.command("normalize", help="Print the full package name for each short name.")(normalize_command)
app.command("shorthand", help="Print the short display name for each full package name.")(shorthand_command)
app.command("namespace", help="Split each term into its @scope/ namespace and bare name.")(namespace_command)
app.command("check-config", help="Validate the lintnaming configuration.")(check_config_command)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """lintnaming - package name normalization.

    Run 'lintnaming normalize foo' to get the full plugin package name.
    """
    ctx.obj = {"verbose": verbose}
