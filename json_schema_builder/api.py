"""
Public error API for the JSON Schema builder.
"""

from enum import Enum, auto
from typing import Optional


class ErrorCode(Enum):
    """Enumeration of schema building error codes."""
    INVALID_SELECTOR = auto()
    INVALID_EXPRESSION = auto()
    UNSUPPORTED_TYPE = auto()
    PROPERTY_NOT_FOUND = auto()
    PATH_CONFLICT = auto()
    UNSUPPORTED_FORMAT = auto()


class SchemaBuilderError(Exception):
    """
    Base class for every error raised while building a schema.

    Attributes:
        code: The error code identifying the type of error
        message: Human-readable error message
        path: JSON Pointer to the property being built, if known
    """

    def __init__(self, code: ErrorCode, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"Error at '{self.path}': {self.message}"
        return self.message


class ParseError(SchemaBuilderError, ValueError):
    """A selector or predicate does not have a supported shape."""

    def __init__(self, message: str = "Invalid expression",
                 code: ErrorCode = ErrorCode.INVALID_EXPRESSION,
                 path: Optional[str] = None):
        super().__init__(code, message, path)


class UnsupportedTypeError(SchemaBuilderError, TypeError):
    """A raw value cannot be turned into a constraint node."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(ErrorCode.UNSUPPORTED_TYPE, message, path)


class PropertyNotFoundError(SchemaBuilderError, LookupError):
    """A selected property is not declared on the schema's model."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(ErrorCode.PROPERTY_NOT_FOUND, message, path)


class PathConflictError(SchemaBuilderError, ValueError):
    """A selected path runs through a node that cannot hold properties."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(ErrorCode.PATH_CONFLICT, message, path)


class UnsupportedFormatError(SchemaBuilderError, ValueError):
    """A string format tag is not one of the known formats."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(ErrorCode.UNSUPPORTED_FORMAT, message, path)
