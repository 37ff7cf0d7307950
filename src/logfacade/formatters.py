"""
Line formatters.

A provider hands one formatter to every logger it issues.
  - plain:   "[{context}] - {message}"
  - leveled: "[{context}] [{LEVEL}] - {message}" for leveled calls,
             plain shape for unleveled ones
"""

from abc import ABC, abstractmethod

from logfacade.records import LogRecord


class LineFormatter(ABC):
    """Base formatter. Transforms LogRecord → single text line (no newline)."""

    @abstractmethod
    def format(self, record: LogRecord) -> str: ...


class PlainFormatter(LineFormatter):
    """
    Default line shape. The level is carried on the record but not printed.
    Example: [OrderService] - Order accepted
    """

    def format(self, record: LogRecord) -> str:
        return f"[{record.context}] - {record.message}"


class LeveledFormatter(LineFormatter):
    """
    Opt-in shape that prints the severity of leveled calls.
    Example: [OrderService] [ERROR] - Payment declined
    """

    def format(self, record: LogRecord) -> str:
        if record.level is None:
            return f"[{record.context}] - {record.message}"
        return f"[{record.context}] [{record.level_name}] - {record.message}"


FORMATTERS: dict[str, type[LineFormatter]] = {
    "plain": PlainFormatter,
    "leveled": LeveledFormatter,
}


def get_formatter(name: str) -> LineFormatter:
    """Build a formatter from its config name."""
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown formatter '{name}'. Valid formatters: {', '.join(FORMATTERS)}"
        )
