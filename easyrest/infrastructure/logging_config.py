"""Logging setup for the host application."""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stdout at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )
