import logging

from rich.logging import RichHandler

from sqlite_viz.logging_config import LOGGER_NAME, configure_logging


def test_configure_logging_is_idempotent():
    configure_logging("info")
    logger = configure_logging("debug")
    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG


def test_module_loggers_are_children():
    configure_logging("warning")
    child = logging.getLogger("sqlite_viz.loader")
    assert child.getEffectiveLevel() == logging.WARNING
    assert LOGGER_NAME == "sqlite_viz"
