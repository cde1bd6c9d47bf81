"""
Boolean constraint node.
"""

from typing import Any, Dict, List, Optional

from .base import TypeSchema
from ..utils import SchemaKeywords


class BooleanSchema(TypeSchema):
    """
    Constraint node for boolean properties.
    """

    def __init__(self, enum: Optional[List[bool]] = None, required: bool = True):
        super().__init__(required)
        self.enum = list(enum) if enum is not None else None

    @property
    def json_type(self) -> str:
        return "boolean"

    def _keywords(self) -> Dict[str, Any]:
        if self.enum is None:
            return {}
        return {SchemaKeywords.ENUM: list(self.enum)}
