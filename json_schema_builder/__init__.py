#!/usr/bin/env python3
"""
JSON Schema Builder

This package compiles per-property selectors, literals, comparison predicates
and typed descriptors into a JSON Schema Draft-04 document.
"""

import logging

from .api import (
    ErrorCode,
    SchemaBuilderError,
    ParseError,
    UnsupportedTypeError,
    PropertyNotFoundError,
    PathConflictError,
    UnsupportedFormatError
)
from .constraints import (
    PropertySchema,
    StringSchema,
    NumberSchema,
    BooleanSchema,
    ArraySchema,
    ObjectSchema,
    AnyOf,
    OneOf,
    AllOf,
    Not
)
from .compiler import LiteralMode, compile_node
from .expressions import PathSegment, Range, parse_range, resolve_path
from .schema import Schema, DictionarySchema
from .version import __version__

# Library logging: handlers are left to the application
logger = logging.getLogger("json_schema_builder")
logger.addHandler(logging.NullHandler())

# Export public classes and functions
__all__ = [
    "Schema",
    "DictionarySchema",
    "PropertySchema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "ArraySchema",
    "ObjectSchema",
    "AnyOf",
    "OneOf",
    "AllOf",
    "Not",
    "LiteralMode",
    "compile_node",
    "PathSegment",
    "Range",
    "parse_range",
    "resolve_path",
    "ErrorCode",
    "SchemaBuilderError",
    "ParseError",
    "UnsupportedTypeError",
    "PropertyNotFoundError",
    "PathConflictError",
    "UnsupportedFormatError",
    "__version__"
]
