"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys


def configure_logging(level_name: str) -> None:
    """Send log records to stderr so command output stays clean."""
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("pricetracker").setLevel(level)
