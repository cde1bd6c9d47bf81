"""
Base constraint node classes for the JSON Schema builder.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from ..api import ParseError
from ..expressions import Range, parse_range
from ..utils import SchemaKeywords


class PropertySchema(ABC):
    """
    Base class for all constraint nodes.

    A node describes the rule for one property (or for a whole document).
    The ``required`` flag only decides whether the parent object lists the
    property as required; it is not part of the node's document and does not
    take part in equality.
    """

    def __init__(self, required: bool = True):
        """
        Initialize a new constraint node.

        Args:
            required: Whether the parent object requires this property
        """
        self.required = required

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize this node into its JSON Schema document.

        Returns:
            A fresh dictionary; mutating it does not affect the node
        """
        pass

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PropertySchema):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __str__(self) -> str:
        """String representation of the node."""
        return f"{self.__class__.__name__}"

    def __repr__(self) -> str:
        """Detailed representation of the node."""
        return self.__str__()


class TypeSchema(PropertySchema, ABC):
    """
    Base class for nodes bound to a single JSON type.
    """

    @property
    @abstractmethod
    def json_type(self) -> str:
        """
        Get the JSON Schema type for this node.

        Returns:
            JSON Schema type name
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        result = {SchemaKeywords.TYPE: self.json_type}
        result.update(self._keywords())
        return result

    @abstractmethod
    def _keywords(self) -> Dict[str, Any]:
        """
        Type-specific keywords of this node, camelCased and without ``None``
        values.
        """
        pass

    def __str__(self) -> str:
        """String representation of the node."""
        parts = [f"{key}={value}" for key, value in self._keywords().items()]
        return f"{self.__class__.__name__}({', '.join(parts)})"


def range_from(predicate: Any) -> Range:
    """Accept either an already extracted Range or a predicate."""
    if isinstance(predicate, Range):
        return predicate
    return parse_range(predicate)


def length_bounds(predicate: Any) -> Tuple[Optional[int], Optional[int]]:
    """
    Convert a length predicate into inclusive integer bounds.

    Draft-04 has no exclusive length keywords, so ``x < 10`` becomes a
    maximum of 9 and ``x > 2`` a minimum of 3.

    Args:
        predicate: Predicate on the length, or an extracted Range

    Returns:
        (minimum, maximum) tuple, either of which may be None

    Raises:
        ParseError: If the predicate is invalid or allows no length at all
    """
    bounds = range_from(predicate)
    minimum = maximum = None

    if bounds.min is not None:
        if bounds.min_exclusive:
            minimum = math.floor(bounds.min) + 1
        else:
            minimum = math.ceil(bounds.min)
        minimum = max(minimum, 0)

    if bounds.max is not None:
        if bounds.max_exclusive:
            maximum = math.ceil(bounds.max) - 1
        else:
            maximum = math.floor(bounds.max)
        if maximum < 0:
            raise ParseError(f"Length cannot be less than zero (maximum {maximum})")

    return minimum, maximum
