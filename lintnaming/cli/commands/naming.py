"""
Naming command implementations.

Thin wrappers around NameResolver. The normalize and shorthand commands print
one result per input name so their output can be piped.
"""
from typing import List, Optional

import typer
from rich.table import Table
from rich.text import Text

from lintnaming.categories import PackageCategory
from lintnaming.cli.commands import fail, load_resolver, setup_logging
from lintnaming.core.resolver import NameResolver
from lintnaming.rich_utils.ui_helpers import get_console
from lintnaming.utils.exceptions import NamingError


def normalize_command(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="Short package names"),
    category: str = typer.Option(PackageCategory.PLUGIN.key, "-t", "--type", help="Package category: plugin, config or formatter"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
):
    """Print the full package name for each short name."""
    resolver = load_resolver(ctx, config_path)
    console = get_console()
    try:
        for name in names:
            console.print(resolver.normalize(name, category), markup=False, soft_wrap=True)
    except NamingError as e:
        fail(e)


def shorthand_command(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="Full package names"),
    category: str = typer.Option(PackageCategory.PLUGIN.key, "-t", "--type", help="Package category: plugin, config or formatter"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
):
    """Print the short display name for each full package name."""
    resolver = load_resolver(ctx, config_path)
    console = get_console()
    try:
        for name in names:
            console.print(resolver.shorthand(name, category), markup=False, soft_wrap=True)
    except NamingError as e:
        fail(e)


def namespace_command(
    ctx: typer.Context,
    terms: List[str] = typer.Argument(..., help="Terms to split"),
):
    """Show the namespace and bare name of each term."""
    setup_logging(ctx)
    resolver = NameResolver()
    console = get_console()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Term", style="white")
    table.add_column("Namespace", style="white")
    table.add_column("Name", style="white")

    for term in terms:
        namespace, bare_name = resolver.split(term)
        table.add_row(Text(term), Text(namespace or "-"), Text(bare_name))

    console.print(table)
