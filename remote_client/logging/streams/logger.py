from .logger_stream import LoggerStream


class Logger:
    """Registry of named LoggerStreams, created on first access."""

    def __init__(self, directory: str | None = None) -> None:
        self._directory = directory
        self._streams: dict[str, LoggerStream] = {}

    def __getitem__(self, name: str) -> LoggerStream:
        if (stream := self._streams.get(name)) is None or stream.closed:
            stream = LoggerStream(name=name, directory=self._directory)
            self._streams[name] = stream

        return stream

    def close(self):
        for stream in self._streams.values():
            stream.close()

        self._streams.clear()
