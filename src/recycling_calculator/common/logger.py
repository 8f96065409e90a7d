"""Shared application logger."""
import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME: str = "recycling_calculator"


def get_logger(name: str = LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """
    Build the project logger with a rich console handler writing to stderr.

    Calling this twice for the same name does not stack handlers.

    :param str name: Logger name
    :param int level: Initial logging level

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    log.setLevel(level)

    if not log.handlers:
        # RichHandler renders time, level and location itself
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=True,
        )
        log.addHandler(handler)

    return log


def set_level(level: str) -> None:
    """Change the project logger verbosity from a level name (e.g. "DEBUG")."""
    logger.setLevel(level.upper())


logger: logging.Logger = get_logger()
