"""
Normalization of raw values into constraint nodes.
"""

import inspect
import re
from enum import Enum, auto
from typing import Any

from .api import UnsupportedTypeError
from .constraints import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    PropertySchema,
    StringSchema
)
from .expressions import parse_range
from .utils import PatternUtils


class LiteralMode(Enum):
    """How a plain string literal is turned into an exact-match rule."""
    ENUM = auto()
    PATTERN = auto()


def compile_node(value: Any, literal_mode: LiteralMode = LiteralMode.ENUM) -> PropertySchema:
    """
    Compile a raw value into a constraint node.

    Dispatch order, first match wins:

    - compiled regex: string node with that pattern
    - string: exact-match string node (enum or anchored pattern)
    - boolean: boolean node allowing only that value
    - number: number node with minimum == maximum == value
    - existing node (descriptor, nested schema, combinator): unchanged
    - callable: comparison predicate, a range on the number (or on the
      array length for ``x.length`` predicates)

    Args:
        value: Raw value to compile
        literal_mode: How plain strings are matched

    Returns:
        The compiled node

    Raises:
        UnsupportedTypeError: If the value has none of the shapes above
        ParseError: If a callable is not a supported predicate
    """
    if isinstance(value, re.Pattern):
        return StringSchema(pattern=value.pattern)

    if isinstance(value, str):
        if literal_mode is LiteralMode.PATTERN:
            return StringSchema(pattern=PatternUtils.exact(value))
        return StringSchema(enum=[value])

    # bool is an int subclass, so it has to be checked first
    if isinstance(value, bool):
        return BooleanSchema(enum=[value])

    if isinstance(value, (int, float)):
        return NumberSchema(minimum=value, maximum=value)

    if isinstance(value, PropertySchema):
        return value

    if callable(value) and not inspect.isclass(value):
        bounds = parse_range(value)
        if bounds.of_length:
            return ArraySchema(bounds)
        return NumberSchema(bounds)

    raise UnsupportedTypeError(
        f"Unsupported type '{type(value).__name__}'")
