"""
Constraint node package initialization.
"""

from .base import PropertySchema, TypeSchema
from .strings import StringSchema
from .numbers import NumberSchema
from .booleans import BooleanSchema
from .arrays import ArraySchema
from .objects import ObjectSchema
from .logical import (
    Combinator,
    AnyOf,
    OneOf,
    AllOf,
    Not
)

__all__ = [
    "PropertySchema",
    "TypeSchema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "ArraySchema",
    "ObjectSchema",
    "Combinator",
    "AnyOf",
    "OneOf",
    "AllOf",
    "Not"
]
