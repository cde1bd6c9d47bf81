"""
Fluent schema builder.

Example:
    schema = (Schema()
              .with_(lambda m: m.StringProp, re.compile(r"^[A-z]+\\.[A-z]+$"))
              .with_(lambda m: m.NumberProp, lambda x: x >= 10)
              .with_(lambda m: m.ObjProp.Lvl2StrProp, "exact value")
              .build())
"""

import json
import logging
import types
import typing
from typing import Any, Dict, List, Optional, Union

from .api import PathConflictError, PropertyNotFoundError
from .compiler import LiteralMode, compile_node
from .constraints import ObjectSchema, PropertySchema
from .expressions import PathSegment, Selector, resolve_path
from .utils import JsonPointer, SchemaKeywords

logger = logging.getLogger("json_schema_builder")

# Origins of Optional[X] and, on Python 3.10+, X | None
_UNION_TYPES = tuple(t for t in (Union, getattr(types, "UnionType", None)) if t is not None)


def _unwrap_optional(annotation: Any) -> Any:
    """Reduce Optional[X] (and X | None) to X."""
    args = typing.get_args(annotation)
    if args and typing.get_origin(annotation) in _UNION_TYPES:
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _declared_fields(model: Any) -> Dict[str, Any]:
    """Annotated fields of a model class, or nothing for other types."""
    if not isinstance(model, type):
        return {}
    try:
        return typing.get_type_hints(model)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to the raw annotations
        return dict(getattr(model, "__annotations__", {}))


class Schema(ObjectSchema):
    """
    Builds an object schema one property at a time.

    Each ``with_`` call resolves a selector into a property path, compiles
    the value into a node and stores it at that path, creating intermediate
    object nodes as needed. A selector returning its argument unchanged
    (``lambda m: m``) sets the rule shared by every key instead.
    """

    def __init__(self,
                 model: Optional[type] = None,
                 *,
                 required: bool = True,
                 additional_properties: Optional[Union[bool, PropertySchema]] = None):
        """
        Initialize a new schema builder.

        Args:
            model: Class whose annotations declare the selectable properties;
                when given, every selector path is checked against it
            required: Whether a parent object requires this property
            additional_properties: Whether undeclared properties are allowed
        """
        super().__init__(additional_properties=additional_properties, required=required)
        self.model = model

    def with_(self, selector: Selector, value: Any) -> "Schema":
        """
        Add a rule for the selected property.

        Args:
            selector: Property selector, e.g. ``lambda m: m.Parent.Child``
            value: Literal, compiled regex, predicate, node or nested schema

        Returns:
            This builder, for chaining

        Raises:
            ParseError: If the selector or a predicate is not supported
            UnsupportedTypeError: If the value cannot be compiled
            PropertyNotFoundError: If the path is not declared on the model
            PathConflictError: If the path runs through a non-object node
        """
        segments = resolve_path(selector)
        node = compile_node(value, LiteralMode.PATTERN)

        if not segments:
            logger.debug(f"Setting additional properties of {self.__class__.__name__} to {node}")
            self.additional_properties = node
            return self

        self._check_model(segments)
        levels = self._walk(segments)

        for level, segment in zip(levels, segments):
            if segment.leaf:
                level.properties[segment.name] = node
            if node.required:
                level.add_required(segment.name)

        logger.debug(f"Added {node} at '{self._pointer(segments)}'")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the schema without the ``$schema`` marker.

        A builder holding only a shared rule for every key serializes to
        that rule's document.
        """
        if not self.properties and isinstance(self.additional_properties, PropertySchema):
            return self.additional_properties.to_dict()
        return super().to_dict()

    def build(self) -> Dict[str, Any]:
        """
        Build the Draft-04 document.

        The builder stays usable; later ``with_`` calls show up in later
        builds.

        Returns:
            A fresh document dictionary
        """
        document = {SchemaKeywords.SCHEMA: SchemaKeywords.DRAFT_04}
        document.update(self.to_dict())
        logger.debug(f"Built {self}")
        return document

    def json(self, indent: Optional[int] = None) -> str:
        """
        Build the document and serialize it as JSON text.

        Args:
            indent: Indentation passed to json.dumps

        Returns:
            JSON text of the document
        """
        return json.dumps(self.build(), indent=indent)

    def _walk(self, segments: List[PathSegment]) -> List[ObjectSchema]:
        """
        Find (or create) the object node holding each segment.

        Every existing node on the path is checked before anything is
        created, so a conflicting path leaves the tree untouched.

        Returns:
            One object node per segment, root first
        """
        node: Optional[ObjectSchema] = self
        for i, segment in enumerate(segments[:-1]):
            child = node.properties.get(segment.name)
            if child is None:
                break
            if not isinstance(child, ObjectSchema) or not child.accepts_properties:
                raise PathConflictError(
                    f"Cannot add properties to {child}",
                    path=self._pointer(segments[:i + 1]))
            node = child

        levels = [self]
        node = self
        for segment in segments[:-1]:
            child = node.properties.get(segment.name)
            if child is None:
                child = ObjectSchema()
                node.properties[segment.name] = child
            node = child
            levels.append(node)
        return levels

    def _check_model(self, segments: List[PathSegment]) -> None:
        """
        Check that every segment is declared on the model.

        Raises:
            PropertyNotFoundError: If a segment is not declared
        """
        if self.model is None:
            return

        current = self.model
        for i, segment in enumerate(segments):
            fields = _declared_fields(current)
            if segment.name not in fields:
                pointer = self._pointer(segments[:i + 1])
                raise PropertyNotFoundError(
                    f"Property '{segment.name}' could not be found on {getattr(current, '__name__', current)}",
                    path=pointer)
            current = _unwrap_optional(fields[segment.name])

    @staticmethod
    def _pointer(segments: List[PathSegment]) -> str:
        return JsonPointer.from_parts([segment.name for segment in segments])


class DictionarySchema(Schema):
    """
    Schema for objects used as dictionaries.

    The rules added to this builder apply to the value under every key, so
    ``DictionarySchema().with_(lambda x: x.Child, 1)`` describes
    ``{"any key": {"Child": 1}, ...}``.
    """

    accepts_properties = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            SchemaKeywords.TYPE: "object",
            SchemaKeywords.ADDITIONAL_PROPERTIES: super().to_dict()
        }
