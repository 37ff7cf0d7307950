"""
Logger providers.

A provider is a source of loggers that share one sink and one formatter.
It caches loggers by context label: asking twice for the same context
returns the same Logger instance for the provider's lifetime.
"""

import threading
from pathlib import Path
from typing import Optional, TextIO

from logfacade.formatters import LineFormatter, PlainFormatter
from logfacade.logger import Logger, context_label
from logfacade.sinks import FileSink, StreamSink, TextSink


class LoggerProvider:
    """
    Base provider. Writes to standard output unless given another sink.

    Usage:
        provider = LoggerProvider()
        log = provider.create_logger(OrderService)
        assert provider.create_logger("OrderService") is log
    """

    def __init__(
        self,
        sink: Optional[TextSink] = None,
        formatter: Optional[LineFormatter] = None,
    ):
        self._sink = sink if sink is not None else StreamSink()
        self._formatter = formatter if formatter is not None else PlainFormatter()
        self._loggers: dict[str, Logger] = {}
        self._lock = threading.Lock()

    @property
    def sink(self) -> TextSink:
        return self._sink

    @property
    def formatter(self) -> LineFormatter:
        return self._formatter

    # ── Logger cache ──────────────────────────────────────────────

    def create_logger(self, context: str | type) -> Logger:
        """Return the cached logger for this context, creating it on first use."""
        key = context_label(context)
        logger = self._loggers.get(key)
        if logger is None:
            with self._lock:
                # Double-check after acquiring lock
                logger = self._loggers.get(key)
                if logger is None:
                    logger = Logger(key, sink=self._sink, formatter=self._formatter)
                    self._loggers[key] = logger
        return logger

    def get_logger(self, context: str | type) -> Logger | None:
        """Look up a cached logger without creating one."""
        return self._loggers.get(context_label(context))

    @property
    def contexts(self) -> list[str]:
        """Context labels with a cached logger, sorted."""
        with self._lock:
            return sorted(self._loggers)

    @property
    def count(self) -> int:
        return len(self._loggers)

    # ── Cleanup ───────────────────────────────────────────────────

    def flush(self) -> None:
        self._sink.flush()

    def close(self) -> None:
        """Release the sink. Cached loggers stay valid; file sinks reopen on write."""
        self._sink.close()


class ConsoleLoggerProvider(LoggerProvider):
    """Writes to a text stream, standard output by default."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        formatter: Optional[LineFormatter] = None,
    ):
        super().__init__(sink=StreamSink(stream), formatter=formatter)


class FileLoggerProvider(LoggerProvider):
    """Appends to a single text file shared by all of its loggers."""

    def __init__(
        self,
        path: str | Path,
        formatter: Optional[LineFormatter] = None,
    ):
        super().__init__(sink=FileSink(path), formatter=formatter)

    @property
    def path(self) -> Path:
        return self._sink.path
