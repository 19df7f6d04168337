"""
Custom application exceptions.

Assembly is permissive: missing hosts, empty paths and unmatched
placeholders all render without complaint. The exceptions here cover
the few inputs that cannot be interpreted at all.
"""

from typing import Any


class UrlBuilderError(Exception):
    """Base exception for the URL builder."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentShape(UrlBuilderError):
    """
    Raised when an argument is neither a mapping, a sequence nor a primitive.

    Examples: a set passed to param(), an arbitrary object as an
    initializer, a mapping mixed into an alternating name/value list.
    """

    def __init__(self, value: Any, reason: str = "Unsupported argument shape"):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot interpret {type(value).__name__} {value!r}: {reason}")
