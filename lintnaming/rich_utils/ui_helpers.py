import os
import sys

from rich.console import Console

def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )

def get_console(stderr: bool = False) -> Console:
    """Detect environment and create console."""
    if is_ci_environment():
        # CI/automated environment or piped output - plain text only
        return Console(force_terminal=False, no_color=True, stderr=stderr, highlight=False)

    # Interactive terminal - full Rich capabilities
    return Console(stderr=stderr, highlight=False)
