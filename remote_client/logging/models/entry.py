from typing import Any

import msgspec
from msgspec import structs

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    """
    Base structured log entry.

    Subclasses add typed fields, all of which are available to the
    stream template by name alongside the caller context.
    """

    message: str | None = None
    level: LogLevel

    def to_template(
        self,
        template: str,
        context: dict[str, Any] | None = None,
    ) -> str:
        fields = structs.asdict(self)
        fields["level"] = self.level.value

        if context:
            fields.update(context)

        return template.format(**fields)
