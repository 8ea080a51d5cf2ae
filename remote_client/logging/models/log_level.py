from __future__ import annotations
from enum import Enum
from typing import Literal

LogLevelName = Literal[
    'trace',
    'debug',
    'info',
    'warn',
    'error',
    'critical',
    'fatal'
]


class LogLevel(Enum):
    """Log levels, declared from least to most severe."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    FATAL = "FATAL"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def at_least(self, threshold: LogLevel) -> bool:
        return self.severity >= threshold.severity

    @classmethod
    def from_name(cls, level_name: LogLevelName | str) -> LogLevel:
        try:
            return cls[level_name.upper()]

        except KeyError:
            raise ValueError(f"Unknown log level {level_name!r}") from None


_SEVERITY: dict[LogLevel, int] = {
    level: severity for severity, level in enumerate(LogLevel)
}
