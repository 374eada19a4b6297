"""Logging setup for the command line tool."""

from __future__ import annotations
import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send log records to stderr through rich, leaving stdout for results."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)
        handler.close()

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
