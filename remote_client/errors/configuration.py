"""
Configuration exceptions.

Raised while translating legacy configuration into a client context
builder. These are fatal: the caller is expected to stop building the
client context when one propagates.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class LegacyConfigurationError(Exception):
    """
    A legacy configuration value that was explicitly set cannot be applied.

    Carries:
    - message: Human-readable description
    - class_name: Configured selector identifier that failed
    - cause: Original exception being wrapped
    - context: Additional debugging info (cluster name, etc.)

    Example:
        raise LegacyConfigurationError(
            "Cannot instantiate deployment node selector",
            class_name="acme.selectors.Sticky",
            cause=err,
        ) from err
    """

    message: str
    class_name: str | None = None
    cause: BaseException | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        class_name = f" {self.class_name!r}" if self.class_name else ""
        ctx = f" {self.context}" if self.context else ""
        cause = ""
        if self.cause:
            # str(cause) may be empty, so the type name is always included
            cause_str = str(self.cause)
            cause_type = type(self.cause).__name__
            if cause_str:
                cause = f" (caused by {cause_type}: {cause_str})"
            else:
                cause = f" (caused by {cause_type})"
        return f"{self.message}{class_name}{ctx}{cause}"
