"""
Selector and predicate introspection.

Selectors such as ``lambda m: m.Parent.Child`` and predicates such as
``lambda x: x < 10`` are never run against real data. Each one is called
exactly once with a recording proxy, and the recorded field accesses or
comparison describe the path or range the caller meant.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Union

from .api import ErrorCode, ParseError


@dataclass(frozen=True)
class PathSegment:
    """
    One field name of a resolved selector path.

    Attributes:
        name: Property name
        leaf: Whether this is the last segment of the path
    """
    name: str
    leaf: bool = False


@dataclass
class Range:
    """
    Bounds described by a single comparison predicate.

    Attributes:
        min: Lower bound, if any
        max: Upper bound, if any
        min_exclusive: Whether the lower bound itself is excluded
        max_exclusive: Whether the upper bound itself is excluded
        of_length: Whether the comparison was made on ``x.length``
    """
    min: Optional[float] = None
    max: Optional[float] = None
    min_exclusive: bool = False
    max_exclusive: bool = False
    of_length: bool = False


Selector = Union[Callable[[Any], Any], Sequence[str]]
Predicate = Callable[[Any], Any]

# Errors a selector or predicate raises when it does more than access fields
# or compare the proxy
_PROXY_ERRORS = (TypeError, AttributeError, LookupError, ValueError, ArithmeticError)


def _invalid_selector(message: str) -> ParseError:
    return ParseError(message, code=ErrorCode.INVALID_SELECTOR)


class _PathRecorder:
    """Proxy recording every attribute or key accessed on it."""

    # Name-mangled, so every other attribute name is a field access
    __slots__ = ("__parts",)

    def __init__(self, parts=()):
        self.__parts = tuple(parts)

    def __getattr__(self, name: str) -> "_PathRecorder":
        # Protocol probes (copy, pickle, ...) are not field accesses
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return _PathRecorder(self.__parts + (name,))

    def __getitem__(self, key: Any) -> "_PathRecorder":
        if not isinstance(key, str):
            raise _invalid_selector(f"Selector keys must be strings, got {type(key).__name__}")
        return _PathRecorder(self.__parts + (key,))

    def __bool__(self) -> bool:
        raise _invalid_selector("Selector must be a plain property access chain")


def resolve_path(selector: Selector) -> List[PathSegment]:
    """
    Resolve a selector into the property path it denotes.

    Args:
        selector: One-argument callable returning a chain of attribute or
            string-key accesses on its argument, or an explicit sequence of
            property names

    Returns:
        Ordered path segments; the last one is flagged as leaf. An empty list
        means the selector returned its argument unchanged (every key).

    Raises:
        ParseError: If the selector is not a plain access chain
    """
    if isinstance(selector, (list, tuple)):
        names = list(selector)
        for name in names:
            if not isinstance(name, str):
                raise _invalid_selector(
                    f"Property names must be strings, got {type(name).__name__}")
    elif callable(selector):
        try:
            result = selector(_PathRecorder())
        except ParseError:
            raise
        except _PROXY_ERRORS as e:
            raise _invalid_selector(f"Selector must be a plain property access chain: {e}") from e

        if not isinstance(result, _PathRecorder):
            raise _invalid_selector("Selector must be a plain property access chain")
        names = list(result._PathRecorder__parts)
    else:
        raise _invalid_selector(f"Unsupported selector '{type(selector).__name__}'")

    last = len(names) - 1
    return [PathSegment(name, leaf=(i == last)) for i, name in enumerate(names)]


class _Comparison:
    """A single recorded comparison between the operand and a value."""

    __slots__ = ("operand", "operator", "value")

    def __init__(self, operand: "_Operand", operator: str, value: Any):
        self.operand = operand
        self.operator = operator
        self.value = value

    def __bool__(self) -> bool:
        # and/or/not and chained comparisons all truth-test their operands
        raise ParseError("Invalid expression")


class _Operand:
    """Proxy standing for the predicate argument (or its length)."""

    __slots__ = ("of_length",)

    def __init__(self, of_length: bool = False):
        self.of_length = of_length

    @property
    def length(self) -> "_Operand":
        if self.of_length:
            raise ParseError("Invalid expression")
        return _Operand(of_length=True)

    def __eq__(self, other):
        return _Comparison(self, "==", other)

    def __ne__(self, other):
        return _Comparison(self, "!=", other)

    def __lt__(self, other):
        return _Comparison(self, "<", other)

    def __le__(self, other):
        return _Comparison(self, "<=", other)

    def __gt__(self, other):
        return _Comparison(self, ">", other)

    def __ge__(self, other):
        return _Comparison(self, ">=", other)

    __hash__ = None

    def __bool__(self) -> bool:
        raise ParseError("Invalid expression")


def parse_range(predicate: Predicate) -> Range:
    """
    Extract the range described by a single-comparison predicate.

    Supported forms are ``x <op> literal`` and ``x.length <op> literal``
    where op is one of ``==``, ``<``, ``<=``, ``>``, ``>=``. A literal on the
    left (``10 > x``) is read as the mirrored comparison.

    Args:
        predicate: One-argument callable

    Returns:
        The range the comparison allows

    Raises:
        ParseError: If the predicate is not exactly one supported comparison
    """
    if not callable(predicate):
        raise ParseError("Invalid expression")

    try:
        comparison = predicate(_Operand())
    except ParseError:
        raise
    except _PROXY_ERRORS as e:
        raise ParseError("Invalid expression") from e

    if not isinstance(comparison, _Comparison):
        raise ParseError("Invalid expression")

    value = comparison.value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError("Invalid expression")

    operator = comparison.operator
    result = Range(of_length=comparison.operand.of_length)

    if operator in ("==", ">="):
        result.min = value
    if operator in ("==", "<="):
        result.max = value
    if operator == "<":
        result.max = value
        result.max_exclusive = True
    if operator == ">":
        result.min = value
        result.min_exclusive = True

    if result.min is None and result.max is None:
        raise ParseError("Invalid expression")

    return result
