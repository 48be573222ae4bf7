"""Unit tests for property lookup and exact property matching.

Signed zero, NaN, infinities and the falsy values each have their own
rules, and every rule is checked in both directions.
"""

import math
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rendertreelib import (
    UNDEFINED,
    props_of_node,
    same_value,
    node_has_property,
    node_has_id,
    node_matches_object_props,
)
from rendertreelib.testing import h, to_tree


def div(**props):
    return to_tree(h("div", props))


class TestPresence:

    def test_finds_properties(self):
        def noop():
            pass

        node = div(onChange=noop, title="foo")

        assert node_has_property(node, "onChange") is True
        assert node_has_property(node, "title", "foo") is True
        assert node_has_property(node, "title", "bar") is False
        assert node_has_property(node, "missing") is False

    def test_does_not_match_on_html_attributes(self):
        node = div(htmlFor="foo")

        assert node_has_property(node, "for", "foo") is False
        assert node_has_property(node, "for") is False
        assert node_has_property(node, "htmlFor", "foo") is True

    def test_undefined_properties_are_absent(self):
        node = div(title=UNDEFINED)

        assert node_has_property(node, "title") is False
        assert node_has_property(node, "title", UNDEFINED) is False

    def test_null_property_is_present(self):
        assert node_has_property(div(foo=None), "foo") is True

    def test_works_on_elements_and_absent_nodes(self):
        assert node_has_property(h("div", {"foo": True}), "foo", True) is True
        assert node_has_property(None, "foo") is False
        assert node_has_property("text", "foo") is False


class TestExactValues:

    def test_booleans(self):
        assert node_has_property(div(foo=True), "foo", True) is True
        assert node_has_property(div(foo=True), "foo", False) is False
        assert node_has_property(div(foo=True), "foo", "true") is False
        assert node_has_property(div(foo=True), "foo", 1) is False
        assert node_has_property(div(foo=False), "foo", False) is True
        assert node_has_property(div(foo=False), "foo", True) is False
        assert node_has_property(div(foo=False), "foo", "false") is False
        assert node_has_property(div(foo=1), "foo", True) is False

    def test_numeric_literals(self):
        assert node_has_property(div(foo=2.3), "foo", 2.3) is True
        assert node_has_property(div(foo=2), "foo", 2) is True
        assert node_has_property(div(foo=2), "foo", "2abc") is False
        assert node_has_property(div(foo=2), "foo", "abc2") is False
        assert node_has_property(div(foo=2), "foo", "2") is False
        assert node_has_property(div(foo=-2), "foo", -2) is True
        assert node_has_property(div(foo=2e8), "foo", 2e8) is True
        assert node_has_property(div(foo=math.inf), "foo", math.inf) is True
        assert node_has_property(div(foo=-math.inf), "foo", -math.inf) is True

    def test_int_and_float_are_both_numbers(self):
        assert node_has_property(div(foo=2), "foo", 2.0) is True

    def test_zeroes(self):
        assert node_has_property(div(foo=0), "foo", 0) is True
        assert node_has_property(div(foo=0), "foo", +0.0) is True
        assert node_has_property(div(foo=-0.0), "foo", -0.0) is True
        assert node_has_property(div(foo=-0.0), "foo", 0) is False
        assert node_has_property(div(foo=-0.0), "foo", 0.0) is False
        assert node_has_property(div(foo=0), "foo", -0.0) is False
        assert node_has_property(div(foo=1), "foo", 0) is False
        assert node_has_property(div(foo=2), "foo", -0.0) is False

    def test_empty_strings(self):
        assert node_has_property(div(foo=""), "foo", "") is True
        assert node_has_property(div(foo="bar"), "foo", "") is False
        assert node_has_property(div(foo=""), "foo", 0) is False
        assert node_has_property(div(foo=""), "foo", False) is False
        assert node_has_property(div(foo=""), "foo", None) is False

    def test_nan(self):
        assert node_has_property(div(foo=float("nan")), "foo", float("nan")) is True
        assert node_has_property(div(foo=math.nan), "foo", math.nan) is True
        assert node_has_property(div(foo=0), "foo", math.nan) is False
        assert node_has_property(div(foo=math.nan), "foo", 0) is False

    def test_null(self):
        assert node_has_property(div(foo=None), "foo", None) is True
        assert node_has_property(div(foo=0), "foo", None) is False
        assert node_has_property(div(foo=None), "foo", 0) is False
        assert node_has_property(div(foo=None), "foo", False) is False
        assert node_has_property(div(foo=None), "foo", "") is False

    def test_false(self):
        assert node_has_property(div(foo=False), "foo", False) is True
        assert node_has_property(div(foo=0), "foo", False) is False
        assert node_has_property(div(foo=False), "foo", 0) is False
        assert node_has_property(div(foo=False), "foo", None) is False

    def test_infinity(self):
        inf = math.inf
        assert node_has_property(div(foo=inf), "foo", inf) is True
        assert node_has_property(div(foo=inf), "foo", +inf) is True
        assert node_has_property(div(foo=inf), "foo", -inf) is False
        assert node_has_property(div(foo=inf), "foo", "Infinity") is False
        assert node_has_property(div(foo=inf), "foo", math.nan) is False
        assert node_has_property(div(foo=0), "foo", inf) is False
        assert node_has_property(div(foo=-inf), "foo", -inf) is True
        assert node_has_property(div(foo=-inf), "foo", inf) is False
        assert node_has_property(div(foo=-inf), "foo", "-Infinity") is False
        assert node_has_property(div(foo=-inf), "foo", math.nan) is False
        assert node_has_property(div(foo=math.nan), "foo", inf) is False
        assert node_has_property(div(foo=math.nan), "foo", -inf) is False
        assert node_has_property(div(foo=0), "foo", -inf) is False


@pytest.mark.parametrize("left,right,expected", [
    (True, 1, False),
    (0, False, False),
    (None, UNDEFINED, False),
    (UNDEFINED, UNDEFINED, True),
    ("a", "a", True),
    ([1], [1], True),
    ((1,), [1], False),
    (0.0, -0.0, False),
    (math.nan, math.nan, True),
])
def test_same_value(left, right, expected):
    assert same_value(left, right) is expected
    assert same_value(right, left) is expected


def test_same_value_objects_by_identity():
    marker = object()
    assert same_value(marker, marker) is True
    assert same_value(marker, object()) is False


def test_props_of_node_drops_undefined():
    node = div(title="x", hidden=UNDEFINED, value=None)
    assert props_of_node(node) == {"title": "x", "value": None}


def test_props_of_leaves_and_absent_nodes():
    assert props_of_node(None) == {}
    assert props_of_node("text") == {}
    assert props_of_node(42) == {}


def test_node_has_id():
    node = div(id="main")
    assert node_has_id(node, "main") is True
    assert node_has_id(node, "other") is False
    assert node_has_id(div(), "main") is False


class TestObjectProps:

    def test_subset_matches(self):
        node = div(title="foo", id="x")
        assert node_matches_object_props(node, {"title": "foo"}) is True
        assert node_matches_object_props(node, {"title": "foo", "id": "x"}) is True
        assert node_matches_object_props(node, {}) is True

    def test_missing_or_different_value(self):
        node = div(title="foo")
        assert node_matches_object_props(node, {"title": "bar"}) is False
        assert node_matches_object_props(node, {"id": "x"}) is False

    def test_undefined_never_matches(self):
        node = div(title=UNDEFINED)
        assert node_matches_object_props(node, {"title": UNDEFINED}) is False

    def test_nested_mappings(self):
        node = div(style={"color": "red", "margin": 0})
        assert node_matches_object_props(node, {"style": {"color": "red"}}) is True
        assert node_matches_object_props(node, {"style": {"color": "blue"}}) is False
        assert node_matches_object_props(node, {"style": {"margin": -0.0}}) is False
        assert node_matches_object_props(div(style="inline"), {"style": {"color": "red"}}) is False
