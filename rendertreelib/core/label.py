"""Short textual labels for render tree nodes, used in diagnostics."""

import numbers
from typing import Any

from .node import RenderNode, UNDEFINED


def display_name_of_kind(kind: Any) -> str:
    """Return the human-facing name of a node kind.

    Priority: an explicit ``displayName`` attribute, then the kind's own
    ``__name__``, then the kind itself as text.
    """
    display_name = getattr(kind, "displayName", None)
    if display_name:
        return str(display_name)
    name = getattr(kind, "__name__", None)
    if name:
        return name
    return str(kind)


def get_text_from_node(node: Any) -> str:
    """Render a node as ``<Name />``.

    Absent nodes give an empty string. Bare text and number leaves are
    returned as their text.

    Example:
        >>> get_text_from_node(h(Subject))
        '<Subject />'
    """
    if node is None or node is UNDEFINED:
        return ""
    if isinstance(node, str):
        return node
    if isinstance(node, numbers.Number) and not isinstance(node, bool):
        return str(node)
    kind = node.kind if isinstance(node, RenderNode) else getattr(node, "kind", node)
    return f"<{display_name_of_kind(kind)} />"


def node_has_type(node: Any, type_name: str) -> bool:
    """Check if a node's kind is ``type_name``.

    Host nodes match on their tag; components match on their display name
    or their ``__name__``.
    """
    if not isinstance(node, RenderNode):
        return False
    kind = node.kind
    if isinstance(kind, str):
        return kind == type_name
    return type_name in (display_name_of_kind(kind), getattr(kind, "__name__", None))
