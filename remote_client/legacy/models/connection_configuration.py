from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ConnectionConfiguration:
    """
    One remote endpoint read from legacy configuration.

    ``port`` is None when the source did not set it. ``protocol`` is an
    explicit URI scheme; when None the scheme is derived from
    ``connection_options``.
    """

    host: str | None = None
    port: int | None = None
    connection_options: dict[str, Any] = field(default_factory=dict)
    protocol: str | None = None
    connection_name: str | None = None
