"""
Helpers shared by the builder: property pointers, literal patterns and
Draft-04 keyword names.
"""

import re
from typing import List


class JsonPointer:
    """RFC 6901 pointers naming a property path in error messages."""

    @staticmethod
    def from_parts(parts: List[str]) -> str:
        """
        Join property names into a pointer, e.g. ``["a", "b"]`` -> ``/a/b``.

        The empty path (the whole document) is the empty string.
        """
        if not parts:
            return ""
        return "".join("/" + JsonPointer.escape_part(part) for part in parts)

    @staticmethod
    def escape_part(part: str) -> str:
        """Escape ``~`` and ``/`` inside a single property name."""
        # ~ first, so the ~ introduced for / is not escaped again
        return str(part).replace("~", "~0").replace("/", "~1")


class PatternUtils:
    """Helpers for building ECMA 262 compatible patterns."""

    # Characters with a special meaning in both Python and ECMA 262 regexes
    SPECIAL_CHARACTERS = re.compile(r"[.*+?^${}()|\[\]\\]")

    @staticmethod
    def escape(value: str) -> str:
        """
        Escape a literal so it can be embedded into a pattern.

        Unlike re.escape, only the characters that are special in both
        dialects are escaped, so the result stays valid for non-Python
        validators.
        """
        return PatternUtils.SPECIAL_CHARACTERS.sub(r"\\\g<0>", value)

    @staticmethod
    def exact(value: str) -> str:
        """Pattern matching exactly the given literal."""
        # Python's $ also matches before a trailing newline
        return f"^{PatternUtils.escape(value)}$(?!\\n)"


class SchemaKeywords:
    """Constants for JSON Schema Draft-04 keywords."""

    DRAFT_04 = "http://json-schema.org/draft-04/schema#"

    # Type keywords
    TYPE = "type"

    # Number keywords
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
    MULTIPLE_OF = "multipleOf"

    # String keywords
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"
    FORMAT = "format"

    # Array keywords
    ITEMS = "items"
    ADDITIONAL_ITEMS = "additionalItems"
    MIN_ITEMS = "minItems"
    MAX_ITEMS = "maxItems"
    UNIQUE_ITEMS = "uniqueItems"

    # Object keywords
    PROPERTIES = "properties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    REQUIRED = "required"

    # Schema composition
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"
    NOT = "not"

    # Miscellaneous
    ENUM = "enum"

    # Schema metadata
    SCHEMA = "$schema"


# Format tags forwarded verbatim to the validator
STRING_FORMATS = ("date-time", "email", "hostname", "ipv4", "ipv6", "uri")
