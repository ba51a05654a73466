from __future__ import annotations
import logging

LOGGER_NAME = "jsonfile"


def setup_console_logging(level: int = logging.DEBUG) -> logging.Logger:
    """
    Opt-in console output for the jsonfile logger. Safe to call repeatedly.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        # already configured (avoid duplicates)
        logger.setLevel(level)
        return logger

    logger.setLevel(level)
    h = logging.StreamHandler()
    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    h.setFormatter(fmt)
    logger.addHandler(h)
    return logger
