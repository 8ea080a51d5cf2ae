"""
Selector-specific exceptions.

Raised by SelectorFactory when a configured selector cannot be
resolved or constructed.
"""


class SelectorInstantiationError(Exception):
    """
    Raised when a selector factory fails to produce a selector.

    Covers unknown identifiers, failed imports, missing attributes,
    non-callable targets, constructors that raise, and constructed
    objects that do not implement the selector protocol. The original
    exception is kept on ``cause`` and chained via ``__cause__``.
    """

    def __init__(self, class_name: str, cause: BaseException) -> None:
        self.class_name = class_name
        self.cause = cause
        super().__init__(
            f"Cannot instantiate selector {class_name!r}: {type(cause).__name__}: {cause}"
        )
