#!/usr/bin/env python3
"""
Tests for selector path resolution and predicate range extraction.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from json_schema_builder import ErrorCode, ParseError, PathSegment, Range, parse_range, resolve_path
# autopep8: on


class TestResolvePath:
    """Tests for resolve_path."""

    def test_single_property(self):
        """A single attribute access is one leaf segment."""
        assert resolve_path(lambda m: m.StringProp) == [PathSegment("StringProp", leaf=True)]

    def test_nested_properties(self):
        """Only the last segment of a chain is a leaf."""
        segments = resolve_path(lambda m: m.ObjProp.Lvl2ObjProp.Lvl3StrProp)

        assert [s.name for s in segments] == ["ObjProp", "Lvl2ObjProp", "Lvl3StrProp"]
        assert [s.leaf for s in segments] == [False, False, True]

    @pytest.mark.parametrize("depth", [1, 2, 5, 10])
    def test_depth(self, depth):
        """A chain of depth n gives n segments."""
        def selector(m):
            for i in range(depth):
                m = getattr(m, f"Level{i}")
            return m

        segments = resolve_path(selector)
        assert len(segments) == depth
        assert [s.leaf for s in segments].count(True) == 1
        assert segments[-1].leaf

    def test_string_keys(self):
        """Subscripts with string keys select properties too."""
        segments = resolve_path(lambda m: m["Quote-Prop"].Child)
        assert [s.name for s in segments] == ["Quote-Prop", "Child"]

    def test_private_looking_names(self):
        """Underscored field names are recorded like any other."""
        assert resolve_path(lambda m: m._parts) == [PathSegment("_parts", leaf=True)]
        assert [s.name for s in resolve_path(lambda m: m._x._parts)] == ["_x", "_parts"]

    def test_identity(self):
        """The identity selector selects every key."""
        assert resolve_path(lambda m: m) == []

    def test_explicit_names(self):
        """A sequence of names is taken as the path itself."""
        segments = resolve_path(["ObjProp", "Lvl2StrProp"])
        assert segments == [PathSegment("ObjProp"), PathSegment("Lvl2StrProp", leaf=True)]
        assert resolve_path(()) == []

    def test_selector_is_not_run_on_data(self):
        """The selector only ever sees the recording proxy."""
        seen = []

        def selector(m):
            seen.append(m)
            return m.StringProp

        resolve_path(selector)
        assert len(seen) == 1
        assert not isinstance(seen[0], dict)

    @pytest.mark.parametrize("selector", [
        lambda m: 5,
        lambda m: "StringProp",
        lambda m: m.NumberProp + 1,
        lambda m: m.NumberProp > 1,
        lambda m: m.a or m.b,
        lambda m: m.items[0],
        lambda m: m.method(),
        lambda m: len(m.ArrayProp),
        lambda m: m.Prop if 1 / 0 else m,
    ])
    def test_invalid_selectors(self, selector):
        """Anything but a plain access chain is rejected."""
        with pytest.raises(ParseError) as excinfo:
            resolve_path(selector)
        assert excinfo.value.code == ErrorCode.INVALID_SELECTOR

    def test_non_callable(self):
        """Selectors must be callables or name sequences."""
        with pytest.raises(ParseError):
            resolve_path(42)
        with pytest.raises(ParseError):
            resolve_path(["a", 1])


class TestParseRange:
    """Tests for parse_range."""

    def test_less_than(self):
        assert parse_range(lambda x: x < 10) == Range(max=10, max_exclusive=True)

    def test_less_than_or_equal(self):
        assert parse_range(lambda x: x <= 10) == Range(max=10)

    def test_greater_than(self):
        assert parse_range(lambda x: x > 10) == Range(min=10, min_exclusive=True)

    def test_greater_than_or_equal(self):
        assert parse_range(lambda x: x >= 10) == Range(min=10)

    def test_equal(self):
        """Equality sets both bounds."""
        assert parse_range(lambda x: x == 10) == Range(min=10, max=10)

    def test_float_literal(self):
        assert parse_range(lambda x: x >= 0.5) == Range(min=0.5)

    def test_mirrored_comparison(self):
        """A literal on the left reads as the mirrored comparison."""
        assert parse_range(lambda x: 10 > x) == Range(max=10, max_exclusive=True)
        assert parse_range(lambda x: 10 == x) == Range(min=10, max=10)

    def test_length(self):
        """Comparisons on x.length are flagged."""
        bounds = parse_range(lambda x: x.length >= 3)
        assert bounds == Range(min=3, of_length=True)

    def test_def_function(self):
        """Regular functions work like lambdas."""
        def predicate(value):
            return value <= 15

        assert parse_range(predicate) == Range(max=15)

    @pytest.mark.parametrize("predicate", [
        lambda x: 5 < x < 10,
        lambda x: x > 1 and x < 5,
        lambda x: x < 1 or x > 5,
        lambda x: not x < 5,
        lambda x: x != 5,
        lambda x: x < "10",
        lambda x: x < True,
        lambda x: x < x,
        lambda x: x + 1 < 5,
        lambda x: len(x) < 5,
        lambda x: (1 / 0) < 3,
        lambda x: x.length.length < 5,
        lambda x: x,
        lambda x: True,
    ])
    def test_invalid_expressions(self, predicate):
        """Only a single supported comparison with a number is accepted."""
        with pytest.raises(ParseError) as excinfo:
            parse_range(predicate)
        assert excinfo.value.code == ErrorCode.INVALID_EXPRESSION
        assert str(excinfo.value) == "Invalid expression"

    def test_not_callable(self):
        with pytest.raises(ParseError):
            parse_range(10)

    def test_parse_error_is_value_error(self):
        """Callers can catch the built-in exception type."""
        with pytest.raises(ValueError):
            parse_range(lambda x: x != 1)
