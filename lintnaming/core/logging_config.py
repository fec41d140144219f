"""Logging setup for the command-line interface."""
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # basicConfig is a no-op once handlers exist, the level still applies
    logging.getLogger().setLevel(level)
