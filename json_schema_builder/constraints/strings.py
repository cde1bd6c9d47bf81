"""
String constraint node.
"""

from typing import Any, Callable, Dict, List, Optional, Pattern, Union

from .base import TypeSchema, length_bounds
from ..api import UnsupportedFormatError
from ..utils import SchemaKeywords, STRING_FORMATS


class StringSchema(TypeSchema):
    """
    Constraint node for string properties.

    The length can be given either as explicit bounds or as a predicate on
    the length, e.g. ``StringSchema(lambda x: x < 10)``.
    """

    def __init__(self,
                 length: Optional[Callable[[Any], Any]] = None,
                 *,
                 format: Optional[str] = None,
                 pattern: Optional[Union[str, Pattern]] = None,
                 min_length: Optional[int] = None,
                 max_length: Optional[int] = None,
                 enum: Optional[List[str]] = None,
                 required: bool = True):
        """
        Initialize a new string node.

        Args:
            length: Predicate on the string length
            format: One of the built-in format tags (date-time, email, ...)
            pattern: Regular expression, as source text or compiled
            min_length: Minimum string length, overrides the predicate
            max_length: Maximum string length, overrides the predicate
            enum: Allowed values
            required: Whether the parent object requires this property

        Raises:
            ParseError: If the length predicate is invalid
            UnsupportedFormatError: If the format tag is unknown
        """
        super().__init__(required)

        if format is not None and format not in STRING_FORMATS:
            raise UnsupportedFormatError(
                f"Unsupported format '{format}', expected one of: {', '.join(STRING_FORMATS)}")

        self.format = format
        self.pattern = pattern if pattern is None or isinstance(pattern, str) else pattern.pattern
        self.min_length = None
        self.max_length = None
        self.enum = list(enum) if enum is not None else None

        if length is not None:
            self.min_length, self.max_length = length_bounds(length)

        if min_length is not None:
            self.min_length = min_length
        if max_length is not None:
            self.max_length = max_length

    @property
    def json_type(self) -> str:
        return "string"

    def _keywords(self) -> Dict[str, Any]:
        keywords = {}
        if self.format is not None:
            keywords[SchemaKeywords.FORMAT] = self.format
        if self.pattern is not None:
            keywords[SchemaKeywords.PATTERN] = self.pattern
        if self.min_length is not None:
            keywords[SchemaKeywords.MIN_LENGTH] = self.min_length
        if self.max_length is not None:
            keywords[SchemaKeywords.MAX_LENGTH] = self.max_length
        if self.enum is not None:
            keywords[SchemaKeywords.ENUM] = list(self.enum)
        return keywords
