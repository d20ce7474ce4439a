"""
Unified exception hierarchy for yamlprops.

All errors raised by the library derive from PropsError, so callers can catch
every loader failure with a single except clause.
"""

from typing import Any


class PropsError(Exception):
    """
    Base exception for all yamlprops errors.

    Example:
        try:
            source = load("application", resource)
        except PropsError as e:
            lg.error(f"cannot load properties: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Args:
            message: What went wrong, without location details
            **context: Where it went wrong, kept in self.context. The library
                sets "resource" (resource description), "location" (formatted
                Origin of a parse failure) and "position" (byte offset of
                undecodable input).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Message followed by the context keys in insertion order."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ParseError(PropsError):
    """
    Raised when a YAML source cannot be turned into documents.

    Examples:
        - Invalid YAML syntax (bad indentation, unclosed flow collection)
        - Bytes that are not valid UTF-8
        - A document whose root is a scalar or a sequence

    Attributes:
        origin: Location of the failure, when the parser reported one
    """

    def __init__(self, message: str, origin: Any = None, **context: Any) -> None:
        if origin is not None:
            context.setdefault("location", str(origin))
        super().__init__(message, **context)
        self.origin = origin


class ResourceError(PropsError):
    """
    Raised when a resource cannot provide its bytes.

    Examples:
        - File does not exist
        - Permission denied
        - Content larger than MAX_SOURCE_SIZE_BYTES
    """

    pass
