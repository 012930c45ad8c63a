from __future__ import annotations

import logging

# Parent of every module logger in this package, whichever import path was used.
PACKAGE_LOGGER = __name__.rpartition(".common")[0]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", *, logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Attach a single console handler to the package logger.

    Safe to call more than once (e.g. app factory in tests): old handlers are replaced.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
