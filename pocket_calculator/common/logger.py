"""Shared application logger."""
import logging
import os

LOGGER_NAME = "pocket_calculator"
LOG_LEVEL_ENV = "POCKET_CALCULATOR_LOG_LEVEL"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return the application logger, attaching a stream handler on first use.

    The level is read from the ``POCKET_CALCULATOR_LOG_LEVEL`` environment variable.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    level_name: str = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level: int = getattr(logging, level_name, logging.WARNING)

    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(fmt="%(asctime)s | %(levelname)-7s | %(message)s", datefmt="%H:%M:%S")
    )
    log.addHandler(handler)
    log.propagate = False
    return log


def set_level(level_name: str) -> None:
    """
    Change the level of the application logger at runtime.

    :param str level_name: Standard logging level name (DEBUG, INFO, ...)

    :raises ValueError: If the level name is unknown
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    logger.setLevel(level)


logger: logging.Logger = get_logger()
