"""
Logging setup
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Optional[Console] = None):
    """
    Route bulkrdns logs to stderr through rich.

    Debug records (skipped addresses, worker progress) only show up
    with verbose on.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter("%(threadName)s %(message)s"))

    logger = logging.getLogger('bulkrdns')
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
