"""Logging setup for the command-line entry point."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int = logging.INFO, console: Optional[Console] = None) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Calling it again replaces the previously installed handler.

    Args:
        level: Minimum level to show
        console: Console to write to (defaults to stderr)

    Returns:
        The configured ``bookdesk`` logger
    """
    logger = logging.getLogger("bookdesk")
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if isinstance(h, RichHandler)), None)
    if handler is not None:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
