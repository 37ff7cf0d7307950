"""
Logger: binds a context label and writes one line per call.

Loggers are issued by a provider, which supplies the shared sink and
formatter. Usage:
    log = provider.create_logger(OrderService)
    log.log("Order accepted")         # [OrderService] - Order accepted
    log.error("Payment declined")     # [OrderService] - Payment declined
"""

from typing import Optional

from logfacade.formatters import LineFormatter, PlainFormatter
from logfacade.records import LogLevel, LogRecord
from logfacade.sinks import StreamSink, TextSink


def context_label(context: str | type) -> str:
    """
    Derive the cache key / line prefix for a context.

    Strings are used verbatim, classes contribute their simple name.
    Identically named classes from different modules share a label; pass an
    explicit string when that matters.
    """
    if isinstance(context, str):
        return context
    if isinstance(context, type):
        return context.__name__
    raise TypeError(
        f"Expected str or class for context, got {type(context).__name__}"
    )


class Logger:
    """Writes `[<context>] - <text>` lines to its provider's sink."""

    def __init__(
        self,
        context: str | type,
        sink: Optional[TextSink] = None,
        formatter: Optional[LineFormatter] = None,
    ):
        self._context = context_label(context)
        self._sink = sink if sink is not None else StreamSink()
        self._formatter = formatter if formatter is not None else PlainFormatter()

    @property
    def context(self) -> str:
        return self._context

    @property
    def sink(self) -> TextSink:
        return self._sink

    def __repr__(self) -> str:
        return f"Logger(context={self._context!r})"

    # ── Core write ────────────────────────────────────────────────

    def log(self, context_or_text: str, text: Optional[str] = None) -> None:
        """
        Write one line.

        log(text) writes with the bound context. log(context, text) accepts a
        context for call-site compatibility but still writes with the bound
        one; the argument is discarded.
        """
        message = context_or_text if text is None else text
        self._write(None, message)

    def _write(self, level: Optional[LogLevel], message: str) -> None:
        record = LogRecord(context=self._context, message=message, level=level)
        self._sink.write_line(self._formatter.format(record))

    # ── Leveled calls ─────────────────────────────────────────────

    def trace(self, text: str) -> None:
        self._write(LogLevel.TRACE, text)

    def debug(self, text: str) -> None:
        self._write(LogLevel.DEBUG, text)

    def info(self, text: str) -> None:
        self._write(LogLevel.INFORMATION, text)

    def warning(self, text: str) -> None:
        self._write(LogLevel.WARNING, text)

    warn = warning

    def error(self, text: str) -> None:
        self._write(LogLevel.ERROR, text)

    def critical(self, text: str) -> None:
        self._write(LogLevel.CRITICAL, text)

    def log_at(self, level: int | str, text: str) -> None:
        """Leveled write with the level given as a value or name."""
        self._write(LogLevel.from_value(level), text)
