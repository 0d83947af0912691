from __future__ import annotations
import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "sqlite_viz"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Send package logs to stderr through rich; stdout is reserved for the graph."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
