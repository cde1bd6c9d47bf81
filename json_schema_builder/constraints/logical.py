"""
Logical combinator nodes.
"""

from typing import Any, Dict, List, Sequence

from .base import PropertySchema
from ..api import UnsupportedTypeError
from ..utils import SchemaKeywords


class Combinator(PropertySchema):
    """
    Base class for combinators over a list of nodes.

    Every child is compiled when the combinator is created, so a combinator
    is itself a finished node that can be nested anywhere.
    """

    keyword = ""

    def __init__(self, schemas: Sequence[Any], required: bool = True):
        """
        Initialize a new combinator.

        Args:
            schemas: Raw values, each compiled into a child node
            required: Whether the parent object requires this property

        Raises:
            UnsupportedTypeError: If schemas is not a list or a child cannot
                be compiled
        """
        from ..compiler import compile_node

        super().__init__(required)

        if not isinstance(schemas, (list, tuple)):
            raise UnsupportedTypeError(
                f"{self.__class__.__name__} expects a list of schemas, got '{type(schemas).__name__}'")

        self.schemas: List[PropertySchema] = [compile_node(schema) for schema in schemas]

    def to_dict(self) -> Dict[str, Any]:
        return {self.keyword: [schema.to_dict() for schema in self.schemas]}

    def __str__(self) -> str:
        """String representation of the combinator."""
        return f"{self.__class__.__name__}(schemas={len(self.schemas)})"

    def __repr__(self) -> str:
        """Detailed representation of the combinator."""
        return f"{self.__class__.__name__}(schemas={[str(s) for s in self.schemas]})"


class AnyOf(Combinator):
    """Property must match ANY of the schemas."""

    keyword = SchemaKeywords.ANY_OF

    @property
    def any_of(self) -> List[PropertySchema]:
        return self.schemas


class OneOf(Combinator):
    """Property must match exactly ONE of the schemas."""

    keyword = SchemaKeywords.ONE_OF

    @property
    def one_of(self) -> List[PropertySchema]:
        return self.schemas


class AllOf(Combinator):
    """Property must match ALL of the schemas."""

    keyword = SchemaKeywords.ALL_OF

    @property
    def all_of(self) -> List[PropertySchema]:
        return self.schemas


class Not(PropertySchema):
    """Property must NOT match the schema."""

    def __init__(self, schema: Any, required: bool = True):
        from ..compiler import compile_node

        super().__init__(required)
        self.schema = compile_node(schema)

    def to_dict(self) -> Dict[str, Any]:
        return {SchemaKeywords.NOT: self.schema.to_dict()}

    def __str__(self) -> str:
        """String representation of the combinator."""
        return f"Not({self.schema})"
