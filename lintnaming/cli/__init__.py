"""
CLI module for lintnaming.

Provides the command-line interface over the naming helpers.
"""
from lintnaming.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
