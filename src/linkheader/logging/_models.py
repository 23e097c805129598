"""Enums used to configure logging."""

from __future__ import annotations

from enum import Enum
from typing import Any, Self

__all__ = [
    "LogLevel",
    "Profile",
]


class Profile(Enum):
    """Output format for log messages."""

    production = "production"
    """One JSON object per message."""

    development = "development"
    """Key-value console output."""


class LogLevel(Enum):
    """Python logging level, accepted in any case."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def _missing_(cls, value: Any) -> Self | None:
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        return None
