"""
LoggerFactory: resolves named providers and asks them for loggers.

Providers are registered under a name, by default their concrete class name.
One provider is the explicit default; the first one registered takes that
role until another is designated. Lookups for unknown providers return None
rather than raising, so callers treat a missing logger as "skip logging".

Usage:
    factory = LoggerFactory(ConsoleLoggerProvider())
    log = factory.create_logger(OrderService)
    log_error(log, "Payment declined")        # [OrderService] - Payment declined

    audit = factory.create_logger("audit", provider_name="FileLoggerProvider")
    log_information(audit, "never written")   # audit is None → no-op
"""

import sys
import threading
from typing import Any, Optional

from logfacade.config import LoggingConfig, ProviderConfig
from logfacade.formatters import get_formatter
from logfacade.logger import Logger
from logfacade.provider import ConsoleLoggerProvider, FileLoggerProvider, LoggerProvider


class LoggerFactory:
    """
    Registry of providers with an explicit default.

    A process-wide instance is available through LoggerFactory.instance();
    it starts with a single ConsoleLoggerProvider.
    """

    _instance: Optional["LoggerFactory"] = None
    _instance_lock = threading.Lock()

    def __init__(self, provider: LoggerProvider | None = None) -> None:
        self._providers: dict[str, LoggerProvider] = {}
        self._default_name: str | None = None
        self._lock = threading.Lock()
        if provider is not None:
            self.add_provider(provider)

    @classmethod
    def instance(cls) -> "LoggerFactory":
        """Get or create the process-wide factory."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(ConsoleLoggerProvider())
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """
        Drop the process-wide factory. For testing only.
        Closes its providers before resetting.
        """
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.close()
                cls._instance = None

    # ── Provider registry ─────────────────────────────────────────

    def add_provider(
        self,
        provider: LoggerProvider,
        name: str | None = None,
        default: bool = False,
    ) -> str:
        """
        Register a provider and return the name it was stored under.

        Without `name` the key is the provider's concrete class name, so a
        second provider of the same kind replaces the first. A replaced
        provider is closed. The first provider registered becomes the
        default; pass `default=True` to make a later one the default instead.
        """
        if name is not None and not name:
            raise ValueError("Provider name must not be empty")
        key = name if name is not None else type(provider).__name__
        with self._lock:
            replaced = self._providers.get(key)
            self._providers[key] = provider
            if default or self._default_name is None:
                self._default_name = key
        if replaced is not None and replaced is not provider:
            replaced.close()
        return key

    def remove_provider(self, name: str) -> LoggerProvider | None:
        """Unregister a provider by name. Returns it (closed) or None."""
        with self._lock:
            provider = self._providers.pop(name, None)
            if provider is not None and self._default_name == name:
                self._default_name = next(iter(self._providers), None)
        if provider is not None:
            provider.close()
        return provider

    def get_provider(self, name: str | None = None) -> LoggerProvider | None:
        """Resolve a provider by name, or the default one when name is None."""
        if name is None:
            name = self._default_name
            if name is None:
                return None
        return self._providers.get(name)

    def set_default_provider(self, name: str) -> None:
        with self._lock:
            if name not in self._providers:
                raise ValueError(
                    f"Unknown provider '{name}'. "
                    f"Registered: {', '.join(self._providers) or 'none'}"
                )
            self._default_name = name

    @property
    def default_provider_name(self) -> str | None:
        return self._default_name

    @property
    def provider_names(self) -> list[str]:
        with self._lock:
            return list(self._providers)

    # ── Logger resolution ─────────────────────────────────────────

    def create_logger(
        self,
        context: str | type,
        provider_name: str | None = None,
    ) -> Logger | None:
        """
        Get the logger for `context` from the named or default provider.

        `context` is a label or a class (its __name__ is used). Returns None
        when no provider is registered or `provider_name` is unknown.
        """
        provider = self.get_provider(provider_name)
        if provider is None:
            return None
        return provider.create_logger(context)

    # ── Configuration ─────────────────────────────────────────────

    def configure(self, config: LoggingConfig | dict[str, Any]) -> None:
        """
        Register providers from a config (or its dict form).

        Expected structure:
            default_provider: console
            providers:
                console: {type: console, stream: stdout}
                audit:   {type: file, path: logs/audit.log, formatter: leveled}
        """
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.from_dict(config)

        # Build everything first so a bad entry registers nothing
        built = {name: build_provider(cfg) for name, cfg in config.providers.items()}
        for name, provider in built.items():
            self.add_provider(provider, name=name)

        if config.default_provider is not None:
            self.set_default_provider(config.default_provider)

    # ── Status ────────────────────────────────────────────────────

    def describe(self) -> dict[str, Any]:
        """Current registry state: default provider and cached contexts."""
        with self._lock:
            providers = dict(self._providers)
            default_name = self._default_name
        return {
            "default_provider": default_name,
            "providers": {
                name: {
                    "type": type(provider).__name__,
                    "formatter": type(provider.formatter).__name__,
                    "contexts": provider.contexts,
                }
                for name, provider in providers.items()
            },
        }

    # ── Cleanup ───────────────────────────────────────────────────

    def flush(self) -> None:
        """Flush all providers."""
        for provider in list(self._providers.values()):
            provider.flush()

    def close(self) -> None:
        """Close all providers. Call during shutdown."""
        for provider in list(self._providers.values()):
            provider.close()


def get_logger(context: str | type, provider_name: str | None = None) -> Logger | None:
    """create_logger() on the process-wide factory."""
    return LoggerFactory.instance().create_logger(context, provider_name)


# ── Helpers ───────────────────────────────────────────────────────────

def build_provider(cfg: ProviderConfig) -> LoggerProvider:
    """Build a provider from its config entry."""
    formatter = get_formatter(cfg.formatter)

    if cfg.type == "console":
        stream = sys.stderr if cfg.stream == "stderr" else None
        return ConsoleLoggerProvider(stream=stream, formatter=formatter)
    elif cfg.type == "file":
        return FileLoggerProvider(path=cfg.path, formatter=formatter)
    else:
        raise ValueError(f"Unknown provider type '{cfg.type}'")
