from __future__ import annotations

import datetime
import sys
import threading

import msgspec

from .entry import Entry


class Log(msgspec.Struct, kw_only=True):
    """An Entry stamped with its logger, call site, thread and UTC time."""

    entry: Entry
    logger_name: str
    filename: str
    function_name: str
    line_number: int
    thread_id: int = msgspec.field(
        default_factory=threading.get_native_id,
    )
    timestamp: str = msgspec.field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc).isoformat()
    )

    @classmethod
    def capture(cls, entry: Entry, logger_name: str, depth: int = 1) -> Log:
        """Stamp ``entry`` with a call site; ``depth=1`` is the direct caller."""
        frame = sys._getframe(depth)

        return cls(
            entry=entry,
            logger_name=logger_name,
            filename=frame.f_code.co_filename,
            function_name=frame.f_code.co_name,
            line_number=frame.f_lineno,
        )

    def render(self, template: str) -> str:
        return self.entry.to_template(
            template,
            context={
                "logger_name": self.logger_name,
                "filename": self.filename,
                "function_name": self.function_name,
                "line_number": self.line_number,
                "thread_id": self.thread_id,
                "timestamp": self.timestamp,
            },
        )
