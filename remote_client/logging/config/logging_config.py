import contextvars
from typing import Literal

import msgspec
from msgspec import structs

from remote_client.logging.models import LogLevel, LogLevelName
from .stream_type import StreamType


LogOutput = Literal['stdout', 'stderr']


class LoggingSettings(msgspec.Struct, frozen=True, kw_only=True):
    level: LogLevel = LogLevel.INFO
    output: StreamType = StreamType.STDERR
    directory: str | None = None
    disabled_loggers: frozenset[str] = frozenset()


_logging_settings: contextvars.ContextVar[LoggingSettings] = contextvars.ContextVar(
    "_logging_settings",
    default=LoggingSettings(),
)


class LoggingConfig:
    """
    View over the logging settings of the current context.

    Settings live in a single context variable holding an immutable
    LoggingSettings, so every LoggingConfig instance in the same context
    sees the same values and each update swaps in a new snapshot.
    """

    @property
    def settings(self) -> LoggingSettings:
        return _logging_settings.get()

    def update(
        self,
        log_directory: str | None = None,
        log_level: LogLevelName | None = None,
        log_output: LogOutput | None = None,
    ):
        changes = {}

        if log_directory:
            changes["directory"] = log_directory

        if log_level:
            changes["level"] = LogLevel.from_name(log_level)

        if log_output:
            changes["output"] = StreamType(log_output)

        if changes:
            _logging_settings.set(
                structs.replace(self.settings, **changes)
            )

    def disable(self, logger_name: str):
        settings = self.settings
        _logging_settings.set(
            structs.replace(
                settings,
                disabled_loggers=settings.disabled_loggers | {logger_name},
            )
        )

    def enable(self, logger_name: str):
        settings = self.settings
        _logging_settings.set(
            structs.replace(
                settings,
                disabled_loggers=settings.disabled_loggers - {logger_name},
            )
        )

    def enabled(self, logger_name: str, log_level: LogLevel) -> bool:
        settings = self.settings
        return (
            logger_name not in settings.disabled_loggers
            and log_level.at_least(settings.level)
        )

    @property
    def level(self) -> LogLevel:
        return self.settings.level

    @property
    def output(self) -> StreamType:
        return self.settings.output

    @property
    def directory(self) -> str | None:
        return self.settings.directory
