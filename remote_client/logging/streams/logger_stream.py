import os
import pathlib
import sys
import threading
from typing import BinaryIO, TextIO

import msgspec

from remote_client.logging.config import LoggingConfig, StreamType
from remote_client.logging.models import Entry, Log


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"


class LoggerStream:
    """
    Synchronous log stream.

    Entries are rendered through a template and written to stdout/stderr,
    or appended as JSON encoded ``Log`` records when a log directory is
    configured on the stream, passed per call, or set on LoggingConfig.
    Once closed, the stream drops further entries.
    """

    def __init__(
        self,
        name: str = "default",
        template: str = DEFAULT_TEMPLATE,
        directory: str | None = None,
    ) -> None:
        self._name = name
        self._template = template
        self._directory = directory

        self._files: dict[str, BinaryIO] = {}
        self._file_lock = threading.Lock()
        self._config = LoggingConfig()
        self._closed = False

    @property
    def name(self):
        return self._name

    @property
    def closed(self):
        return self._closed

    def log(self, entry: Entry, path: str | None = None):
        if self._closed or not self._config.enabled(self._name, entry.level):
            return

        log = Log.capture(entry, self._name, depth=2)

        logfile_path = self._to_logfile_path(path)
        if logfile_path is None:
            stream = self._get_stream_writer()
            stream.write(log.render(self._template) + "\n")
            stream.flush()
            return

        with self._file_lock:
            logfile = self._files.get(logfile_path)
            if logfile is None or logfile.closed:
                pathlib.Path(logfile_path).parent.mkdir(parents=True, exist_ok=True)
                logfile = open(logfile_path, "ab")
                self._files[logfile_path] = logfile

            logfile.write(msgspec.json.encode(log) + b"\n")
            logfile.flush()

    def close(self):
        with self._file_lock:
            self._closed = True

            for logfile in self._files.values():
                logfile.close()

            self._files.clear()

    def _to_logfile_path(self, path: str | None) -> str | None:
        if path is None:
            path = self._directory or self._config.directory

        if path is None:
            return None

        logfile_path = pathlib.Path(path)
        if not logfile_path.suffix:
            logfile_path = logfile_path / f"{self._name}.json"

        elif logfile_path.suffix != ".json":
            logfile_path = logfile_path.with_suffix(".json")

        return os.path.abspath(logfile_path)

    def _get_stream_writer(self) -> TextIO:
        if self._config.output == StreamType.STDOUT:
            return sys.stdout

        return sys.stderr
