"""
Leveled convenience calls.

Each helper accepts the possibly-absent result of create_logger() and does
nothing when it is None, so call sites need no presence check:

    log_error(factory.create_logger("billing", "missing"), "boom")  # no-op
"""

from typing import Optional

from logfacade.logger import Logger


def log_trace(logger: Optional[Logger], text: str) -> None:
    if logger is not None:
        logger.trace(text)


def log_debug(logger: Optional[Logger], text: str) -> None:
    if logger is not None:
        logger.debug(text)


def log_information(logger: Optional[Logger], text: str) -> None:
    if logger is not None:
        logger.info(text)


def log_warning(logger: Optional[Logger], text: str) -> None:
    if logger is not None:
        logger.warning(text)


def log_error(logger: Optional[Logger], text: str) -> None:
    if logger is not None:
        logger.error(text)


def log_critical(logger: Optional[Logger], text: str) -> None:
    if logger is not None:
        logger.critical(text)
