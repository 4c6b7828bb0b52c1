"""
Logger setup for the optics package.
"""
import logging

PACKAGE_LOGGER = "optics"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Sets the level of the package logger and gives it a single
    stream handler. Records do not propagate to the root logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger
