"""
Number constraint node.
"""

from typing import Any, Callable, Dict, Optional

from .base import TypeSchema, range_from
from ..api import ParseError
from ..utils import SchemaKeywords


class NumberSchema(TypeSchema):
    """
    Constraint node for numeric properties.

    The range can be given as explicit bounds or as a comparison predicate,
    e.g. ``NumberSchema(lambda x: x <= 15)``. Strict comparisons keep the
    literal and set the matching exclusive flag.
    """

    def __init__(self,
                 value: Optional[Callable[[Any], Any]] = None,
                 *,
                 multiple_of: Optional[float] = None,
                 minimum: Optional[float] = None,
                 maximum: Optional[float] = None,
                 exclusive_minimum: Optional[bool] = None,
                 exclusive_maximum: Optional[bool] = None,
                 required: bool = True):
        """
        Initialize a new number node.

        Args:
            value: Comparison predicate describing the allowed range
            multiple_of: Value must be a multiple of this
            minimum: Minimum value, overrides the predicate
            maximum: Maximum value, overrides the predicate
            exclusive_minimum: Whether minimum is exclusive
            exclusive_maximum: Whether maximum is exclusive
            required: Whether the parent object requires this property

        Raises:
            ParseError: If the predicate is invalid or compares a length
        """
        super().__init__(required)

        self.multiple_of = multiple_of
        self.minimum = None
        self.maximum = None
        self.exclusive_minimum = None
        self.exclusive_maximum = None

        if value is not None:
            bounds = range_from(value)
            if bounds.of_length:
                raise ParseError("Invalid expression")
            self.minimum = bounds.min
            self.maximum = bounds.max
            if bounds.min_exclusive:
                self.exclusive_minimum = True
            if bounds.max_exclusive:
                self.exclusive_maximum = True

        if minimum is not None:
            self.minimum = minimum
        if maximum is not None:
            self.maximum = maximum
        if exclusive_minimum is not None:
            self.exclusive_minimum = exclusive_minimum
        if exclusive_maximum is not None:
            self.exclusive_maximum = exclusive_maximum

    @property
    def json_type(self) -> str:
        return "number"

    def _keywords(self) -> Dict[str, Any]:
        keywords = {}
        if self.multiple_of is not None:
            keywords[SchemaKeywords.MULTIPLE_OF] = self.multiple_of
        if self.minimum is not None:
            keywords[SchemaKeywords.MINIMUM] = self.minimum
            if self.exclusive_minimum is not None:
                keywords[SchemaKeywords.EXCLUSIVE_MINIMUM] = self.exclusive_minimum
        if self.maximum is not None:
            keywords[SchemaKeywords.MAXIMUM] = self.maximum
            if self.exclusive_maximum is not None:
                keywords[SchemaKeywords.EXCLUSIVE_MAXIMUM] = self.exclusive_maximum
        return keywords
