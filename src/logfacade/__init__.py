"""
logfacade: a thin logging facade.

A factory resolves named providers; a provider issues one cached logger per
context; a logger writes "[<context>] - <message>" lines.
"""

from logfacade.records import LogLevel, LogRecord
from logfacade.formatters import LineFormatter, PlainFormatter, LeveledFormatter
from logfacade.sinks import TextSink, StreamSink, FileSink
from logfacade.logger import Logger, context_label
from logfacade.provider import LoggerProvider, ConsoleLoggerProvider, FileLoggerProvider
from logfacade.factory import LoggerFactory, get_logger, build_provider
from logfacade.config import LoggingConfig, ProviderConfig
from logfacade.extensions import (
    log_trace,
    log_debug,
    log_information,
    log_warning,
    log_error,
    log_critical,
)

__all__ = [
    "LogLevel",
    "LogRecord",
    "LineFormatter",
    "PlainFormatter",
    "LeveledFormatter",
    "TextSink",
    "StreamSink",
    "FileSink",
    "Logger",
    "context_label",
    "LoggerProvider",
    "ConsoleLoggerProvider",
    "FileLoggerProvider",
    "LoggerFactory",
    "get_logger",
    "build_provider",
    "LoggingConfig",
    "ProviderConfig",
    "log_trace",
    "log_debug",
    "log_information",
    "log_warning",
    "log_error",
    "log_critical",
]
