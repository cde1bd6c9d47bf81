"""
Object constraint node.
"""

from typing import Any, Dict, List, Optional, Union

from .base import PropertySchema, TypeSchema
from ..utils import SchemaKeywords


class ObjectSchema(TypeSchema):
    """
    Constraint node for object properties.

    This is the only node that keeps growing after creation: builders add
    properties to it and record which of them are required.
    """

    # Whether a selector path may walk into this node's properties
    accepts_properties = True

    def __init__(self,
                 properties: Optional[Dict[str, PropertySchema]] = None,
                 required_properties: Optional[List[str]] = None,
                 additional_properties: Optional[Union[bool, PropertySchema]] = None,
                 required: bool = True):
        """
        Initialize a new object node.

        Args:
            properties: Nodes for specific properties
            required_properties: Names of required properties
            additional_properties: Whether other properties are allowed, or
                the node every other property must satisfy
            required: Whether the parent object requires this property
        """
        super().__init__(required)
        self.properties: Dict[str, PropertySchema] = dict(properties or {})
        self.required_properties: List[str] = []
        self.additional_properties = additional_properties

        for name in required_properties or []:
            self.add_required(name)

    @property
    def json_type(self) -> str:
        return "object"

    def add_required(self, name: str) -> None:
        """
        Mark a property as required; adding a name twice keeps one entry.

        Args:
            name: Property name
        """
        if name not in self.required_properties:
            self.required_properties.append(name)

    def _keywords(self) -> Dict[str, Any]:
        keywords: Dict[str, Any] = {
            SchemaKeywords.PROPERTIES: {
                name: schema.to_dict() for name, schema in self.properties.items()
            }
        }
        # Draft-04 requires a non-empty array
        if self.required_properties:
            keywords[SchemaKeywords.REQUIRED] = list(self.required_properties)
        if isinstance(self.additional_properties, PropertySchema):
            keywords[SchemaKeywords.ADDITIONAL_PROPERTIES] = self.additional_properties.to_dict()
        elif self.additional_properties is not None:
            keywords[SchemaKeywords.ADDITIONAL_PROPERTIES] = self.additional_properties
        return keywords

    def __str__(self) -> str:
        """String representation of the node."""
        parts = []
        if self.properties:
            parts.append(f"properties={list(self.properties.keys())}")
        if self.required_properties:
            parts.append(f"required={self.required_properties}")
        if self.additional_properties is not None:
            parts.append(f"additional_properties={self.additional_properties}")

        return f"{self.__class__.__name__}({', '.join(parts)})"
