"""Project-wide error definitions.

The set containers themselves never raise: absent elements and empty sets are
ordinary states. Errors here belong to the layers that turn outside input
(environment variables, element files) into set elements.
"""


class UnifyError(Exception):
    """Base class for unify4py errors."""


class UnknownElementTypeError(UnifyError):
    """Raised when an element type name has no registered converter."""

    def __init__(self, type_name: str, known: list[str]) -> None:
        super().__init__(
            f"Unknown element type '{type_name}'. "
            f"Expected one of: {', '.join(known)}."
        )
        self.type_name = type_name
        self.known = known


class ElementConversionError(UnifyError):
    """Raised when an element cannot be converted to the requested type."""

    def __init__(self, value: str, type_name: str) -> None:
        super().__init__(f"Cannot convert element '{value}' to {type_name}.")
        self.value = value
        self.type_name = type_name


class ElementDecodeError(UnifyError):
    """Raised when an element source is not valid UTF-8 text."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Cannot decode {source} as UTF-8: {reason}.")
        self.source = source
        self.reason = reason
