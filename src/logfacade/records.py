"""
Log records and level definitions.

Six severity levels, one per leveled call. Values follow the Python logging
numbering so they order the same way; TRACE sits below DEBUG.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    """Severity attached to a leveled call."""
    TRACE = 5
    DEBUG = 10
    INFORMATION = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve level from string name, case-insensitive."""
        name_upper = name.upper()
        if name_upper in _ALIASES:
            name_upper = _ALIASES[name_upper]
        try:
            return cls[name_upper]
        except KeyError:
            raise ValueError(
                f"Unknown log level '{name}'. "
                f"Valid levels: {', '.join(m.name for m in cls)}"
            )

    @classmethod
    def from_value(cls, value: int | str) -> "LogLevel":
        """Resolve level from int or string."""
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(
                    f"No level with value {value}. "
                    f"Valid values: {', '.join(f'{m.name}={m.value}' for m in cls)}"
                )
        raise TypeError(f"Expected int or str, got {type(value).__name__}")


_ALIASES = {
    "INFO": "INFORMATION",
    "WARN": "WARNING",
}

LEVEL_NAMES: dict[int, str] = {member.value: member.name for member in LogLevel}


def level_name(level: int) -> str:
    """Get display name for a level value. Falls back to numeric string."""
    return LEVEL_NAMES.get(level, str(level))


@dataclass(frozen=True)
class LogRecord:
    """
    One write request, built by Logger and handed to a formatter.

    `level` is None for plain `Logger.log()` calls.
    """
    context: str
    message: str
    level: Optional[LogLevel] = None

    @property
    def level_name(self) -> str | None:
        return level_name(self.level) if self.level is not None else None
