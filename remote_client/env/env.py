from __future__ import annotations
from pydantic import BaseModel, StrictStr, StrictInt
from typing import Callable, Dict, Literal, Union

from remote_client.logging.config import LoggingConfig

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    CLIENT_LOG_LEVEL: Literal[
        "trace", "debug", "info", "warn", "error", "critical", "fatal"
    ] = "info"
    CLIENT_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    CLIENT_LOGS_DIRECTORY: StrictStr | None = None
    CLIENT_INVOCATION_TIMEOUT: StrictInt = 0

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "CLIENT_LOG_LEVEL": str,
            "CLIENT_LOG_OUTPUT": str,
            "CLIENT_LOGS_DIRECTORY": str,
            "CLIENT_INVOCATION_TIMEOUT": int,
        }

    def apply_logging(self) -> LoggingConfig:
        """Push the log level, output and directory into the shared LoggingConfig."""
        logging_config = LoggingConfig()
        logging_config.update(
            log_directory=self.CLIENT_LOGS_DIRECTORY,
            log_level=self.CLIENT_LOG_LEVEL,
            log_output=self.CLIENT_LOG_OUTPUT,
        )

        return logging_config
