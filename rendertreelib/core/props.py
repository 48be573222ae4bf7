"""Property lookup and exact property matching for RenderTreeLib.

Property names are looked up exactly as authored on the node. A query for the
markup attribute name (``for``) never finds the framework property name
(``htmlFor``); there is no alias resolution in either direction.
"""

import math
import numbers
from collections.abc import Mapping
from typing import Any, Dict

from .node import UNDEFINED


def props_of_node(node: Any) -> Dict[str, Any]:
    """Return the props of a node, without entries whose value is UNDEFINED.

    Works with anything carrying a ``props`` mapping. Absent nodes and
    text leaves have no props.

    Args:
        node: RenderNode, element-like object, leaf or None

    Returns:
        New dict of defined props
    """
    props = getattr(node, "props", None)
    if not isinstance(props, Mapping):
        return {}
    return {name: value for name, value in props.items() if value is not UNDEFINED}


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def same_value(left: Any, right: Any) -> bool:
    """Compare two values exactly.

    Differs from ``==`` in the following ways:
    - NaN equals NaN
    - ``0.0`` and ``-0.0`` are different values
    - booleans only equal booleans (``True != 1``)
    - values of different types never match (``2 != "2"``, ``None != False``)

    Ints and floats are both numbers, so ``2 == 2.0`` still holds.
    """
    if left is right:
        return True

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if _is_number(left) and _is_number(right):
        if _is_nan(left) or _is_nan(right):
            return _is_nan(left) and _is_nan(right)
        if left == 0 and right == 0:
            return math.copysign(1.0, left) == math.copysign(1.0, right)
        return left == right

    if _is_number(left) or _is_number(right):
        return False

    if left is None or right is None or left is UNDEFINED or right is UNDEFINED:
        return False

    if type(left) is not type(right):
        return False
    return left == right


def node_has_property(node: Any, prop_key: str, prop_value: Any = UNDEFINED) -> bool:
    """Check if a node declares a property, optionally with an exact value.

    Args:
        node: Node to inspect
        prop_key: Property name exactly as stored on the node
        prop_value: Expected value; omit to test for presence only

    Returns:
        True if the property is present (and matches ``prop_value``)

    Example:
        >>> node_has_property(node, 'title', 'foo')
        True
        >>> node_has_property(node, 'for', 'foo')  # stored as htmlFor
        False
    """
    node_props = props_of_node(node)
    if prop_key not in node_props:
        return False

    if prop_value is UNDEFINED:
        return True

    return same_value(node_props[prop_key], prop_value)


def node_has_id(node: Any, id: Any) -> bool:
    """Check if a node's ``id`` prop exactly equals ``id``."""
    return node_has_property(node, "id", id)


def _is_subset(actual: Mapping, expected: Mapping) -> bool:
    for key, value in expected.items():
        if value is UNDEFINED or key not in actual:
            return False
        current = actual[key]
        if isinstance(value, Mapping):
            if not isinstance(current, Mapping) or not _is_subset(current, value):
                return False
        elif not same_value(current, value):
            return False
    return True


def node_matches_object_props(node: Any, props: Mapping) -> bool:
    """Check if a node's props contain every expected prop.

    Nested mappings match when the node's value holds at least their keys.
    An expected value of UNDEFINED can never match.
    """
    return _is_subset(props_of_node(node), props)
