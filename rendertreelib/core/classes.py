"""Class-name token matching for RenderTreeLib."""

from typing import Any

from .props import props_of_node


def has_class_name(node: Any, class_name: str) -> bool:
    """Check if ``class_name`` is one of the node's class tokens.

    The ``className`` prop is split on whitespace. Values that are not
    strings (such as a class helper object) are converted with ``str()``
    first. Hyphens are part of a token, not separators.

    Args:
        node: Node to inspect
        class_name: Single class token to look for

    Returns:
        True if the token is present, False otherwise (including when the
        node has no ``className`` prop)
    """
    classes = props_of_node(node).get("className") or ""
    if not isinstance(classes, str):
        classes = str(classes)
    return class_name in classes.split()
