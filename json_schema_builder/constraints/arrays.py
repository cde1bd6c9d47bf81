"""
Array constraint node.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from .base import PropertySchema, TypeSchema, length_bounds
from ..utils import SchemaKeywords


class ArraySchema(TypeSchema):
    """
    Constraint node for array properties.

    ``items`` given as a list or tuple is tuple validation: element ``i``
    must satisfy the node compiled from ``items[i]`` (so a literal must be
    matched exactly). Any other ``items`` value is list validation: one node
    applied to every element.
    """

    def __init__(self,
                 length: Optional[Callable[[Any], Any]] = None,
                 *,
                 min_items: Optional[int] = None,
                 max_items: Optional[int] = None,
                 unique_items: Optional[bool] = None,
                 items: Any = None,
                 additional_items: Optional[bool] = None,
                 required: bool = True):
        """
        Initialize a new array node.

        Args:
            length: Predicate on the array length
            min_items: Minimum number of items, overrides the predicate
            max_items: Maximum number of items, overrides the predicate
            unique_items: Whether items must be unique
            items: Tuple (list of raw values) or list (single raw value) rule
            additional_items: Whether items beyond the tuple are allowed
            required: Whether the parent object requires this property

        Raises:
            ParseError: If the length predicate is invalid
            UnsupportedTypeError: If an items value cannot be compiled
        """
        from ..compiler import compile_node

        super().__init__(required)

        self.min_items = None
        self.max_items = None
        self.unique_items = unique_items
        self.additional_items = additional_items
        self.items: Optional[Union[PropertySchema, List[PropertySchema]]] = None

        if length is not None:
            self.min_items, self.max_items = length_bounds(length)

        if min_items is not None:
            self.min_items = min_items
        if max_items is not None:
            self.max_items = max_items

        if isinstance(items, (list, tuple)):
            self.items = [compile_node(item) for item in items]
        elif items is not None:
            self.items = compile_node(items)

    @property
    def json_type(self) -> str:
        return "array"

    @property
    def is_tuple(self) -> bool:
        """Whether items are validated per index."""
        return isinstance(self.items, list)

    def _keywords(self) -> Dict[str, Any]:
        keywords = {}
        if self.min_items is not None:
            keywords[SchemaKeywords.MIN_ITEMS] = self.min_items
        if self.max_items is not None:
            keywords[SchemaKeywords.MAX_ITEMS] = self.max_items
        if self.unique_items is not None:
            keywords[SchemaKeywords.UNIQUE_ITEMS] = self.unique_items
        if self.is_tuple:
            keywords[SchemaKeywords.ITEMS] = [item.to_dict() for item in self.items]
        elif self.items is not None:
            keywords[SchemaKeywords.ITEMS] = self.items.to_dict()
        if self.additional_items is not None:
            keywords[SchemaKeywords.ADDITIONAL_ITEMS] = self.additional_items
        return keywords

    def __str__(self) -> str:
        """String representation of the node."""
        parts = []
        if self.min_items is not None:
            parts.append(f"min_items={self.min_items}")
        if self.max_items is not None:
            parts.append(f"max_items={self.max_items}")
        if self.unique_items is not None:
            parts.append(f"unique_items={self.unique_items}")
        if self.items is not None:
            parts.append(f"items={self.items}")
        if self.additional_items is not None:
            parts.append(f"additional_items={self.additional_items}")

        return f"ArraySchema({', '.join(parts)})"
