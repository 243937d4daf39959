"""Shared utilities for the quilt CLI"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# log records go to stderr
console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for quilt.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows every page written
    - Debug (QUILT_DEBUG=1): DEBUG level - shows classification and misses
    """
    debug = bool(os.environ.get("QUILT_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("quilt")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
