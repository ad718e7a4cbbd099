"""
Centralized logging configuration for the overlay package.

The overlay runs inside someone else's terminal UI, so nothing is printed
unless the host opts in with setup_logging().
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "termhint"

NOISY_LIBRARIES = [
    "asyncio",
    "urllib3",
    "markdown_it",
]


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """
    Route package logs through a Rich handler and quiet third-party loggers.

    Args:
        verbose: If True, emit DEBUG records. If False, only warnings and above.
        console: Console to write to. Defaults to a stderr console so the
            host's stdout drawing is left alone.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        logger.handlers = [NullHandler()]

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False


def silence_logs() -> None:
    """
    Drop every package log record. Useful while the host owns the terminal.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [NullHandler()]
    package_logger.setLevel(logging.CRITICAL)
    package_logger.propagate = False
