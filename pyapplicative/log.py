""" Logging setup for applications that want to see pyapplicative's logs """
import logging

from .config import load_settings

PACKAGE_LOGGER = "pyapplicative"

def configure_logging(level: int | str | None = None) -> logging.Logger:
    """
    Sends the package logger's records to stderr.
    Safe to call more than once: only one handler is ever attached.
    The level defaults to the configured PYAPPLICATIVE_LOG_LEVEL.
    """
    if level is None:
        level = load_settings()["log_level"]
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(handler, logging.StreamHandler)
               for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger
