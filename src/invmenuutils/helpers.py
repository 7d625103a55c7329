"""Helper functions for plugins using invmenuutils."""

import logging

from rich.logging import RichHandler

from invmenuutils.conf import settings


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the plugin.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )
