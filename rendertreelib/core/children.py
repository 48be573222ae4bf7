"""Child normalization for RenderTreeLib.

A node's ``rendered`` slot can take several legal shapes. The normalizer
classifies each value into a ChildShape and dispatches to a shape-specific
flattening routine, producing one flat, ordered list of child units.
"""

import logging
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, Callable, Dict, List

from .node import RenderNode, UNDEFINED

logger = logging.getLogger(__name__)


class ChildShape(Enum):
    """Classification of a value found in a children slot."""
    NODE = "node"           # A single RenderNode
    EMPTY = "empty"         # Absent, null, boolean or empty string
    SEQUENCE = "sequence"   # Ordered sequence, possibly nested
    SET = "set"             # Set of unique children
    MAPPING = "mapping"     # Key/value pairs, values are children
    LEAF = "leaf"           # Primitive or unrecognised value


def is_non_renderable(value: Any) -> bool:
    """Check if a value renders to nothing.

    ``UNDEFINED``, ``None``, booleans and the empty string contribute no
    children wherever they appear in a slot.
    """
    if value is UNDEFINED or value is None:
        return True
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value == ""


def classify_child(value: Any) -> ChildShape:
    """Classify a children-slot value.

    Args:
        value: Any value found in a children slot

    Returns:
        The ChildShape the value belongs to
    """
    if isinstance(value, RenderNode):
        return ChildShape.NODE
    if is_non_renderable(value):
        return ChildShape.EMPTY
    # Strings and bytes are sequences too, but render as text
    if isinstance(value, (str, bytes, bytearray)):
        return ChildShape.LEAF
    if isinstance(value, Mapping):
        return ChildShape.MAPPING
    if isinstance(value, Set):
        return ChildShape.SET
    if isinstance(value, Sequence):
        return ChildShape.SEQUENCE
    return ChildShape.LEAF


def _flatten_node(value: RenderNode, out: List[Any]) -> None:
    out.append(value)


def _flatten_empty(value: Any, out: List[Any]) -> None:
    pass


def _flatten_items(value: Any, out: List[Any]) -> None:
    for item in value:
        _flatten_into(item, out)


def _flatten_mapping(value: Mapping, out: List[Any]) -> None:
    for item in value.values():
        _flatten_into(item, out)


def _flatten_leaf(value: Any, out: List[Any]) -> None:
    if not isinstance(value, (str, int, float)):
        logger.debug(f"Keeping {type(value).__name__} as an opaque leaf")
    out.append(value)


_FLATTENERS: Dict[ChildShape, Callable[[Any, List[Any]], None]] = {
    ChildShape.NODE: _flatten_node,
    ChildShape.EMPTY: _flatten_empty,
    ChildShape.SEQUENCE: _flatten_items,
    ChildShape.SET: _flatten_items,
    ChildShape.MAPPING: _flatten_mapping,
    ChildShape.LEAF: _flatten_leaf,
}


def _flatten_into(value: Any, out: List[Any]) -> None:
    _FLATTENERS[classify_child(value)](value, out)


def normalize_children(slot: Any) -> List[Any]:
    """Flatten a children slot into an ordered list of child units.

    Nested sequences, sets and mapping values are unwrapped in order.
    Non-renderable values are dropped at every depth. Anything that is not
    a recognised collection is kept as a leaf and never looked into.

    Normalizing an already normalized list returns an equal list. Containers
    nested inside one slot are unwrapped recursively; each node's slot is
    normalized separately, so tree depth does not add to that recursion.

    Args:
        slot: Raw ``rendered`` value of a node

    Returns:
        Flat list of RenderNode instances and primitive leaves
    """
    flat: List[Any] = []
    _flatten_into(slot, flat)
    return flat


def children_of_node(node: Any) -> List[Any]:
    """Get the normalized children of a node.

    Text leaves and absent nodes have no children.
    """
    if not isinstance(node, RenderNode):
        return []
    return normalize_children(node.rendered)
