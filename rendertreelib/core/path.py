"""Ancestor path search for RenderTreeLib."""

import logging
from typing import Any, List, Optional, Tuple

from .children import children_of_node, is_non_renderable

logger = logging.getLogger(__name__)


def _ancestors(chain: List[Tuple[Any, Optional[int]]], parent: Optional[int]) -> List[Any]:
    path = []
    while parent is not None:
        node, parent = chain[parent]
        path.append(node)
    path.reverse()
    return path


def path_to_node(target: Any, root: Any) -> Optional[List[Any]]:
    """Find the chain of ancestors leading from root to target.

    Target is matched by identity, not structural equality. Sibling subtrees
    that do not contain the target never appear in the result. The search
    walks pre-order with an explicit stack, so the first occurrence wins and
    tree depth is not bounded by the recursion limit.

    Args:
        target: The exact node (or leaf value) to look for
        root: Root of the tree to search

    Returns:
        Root-first list of every ancestor of target, excluding target itself,
        or None if root is absent or target does not occur under it.
        When target is root the result is ``[]``: found, with no ancestors.
        ``[]`` is falsy, so test for ``None`` to tell found from not found.

    Example:
        >>> # div > [button, nav > [label, input]]
        >>> [n.kind for n in path_to_node(label, tree)]
        ['div', 'nav']
    """
    if is_non_renderable(root):
        return None

    # chain holds (unit, index of its parent in chain) for every expanded unit
    chain: List[Tuple[Any, Optional[int]]] = []
    stack: List[Tuple[Any, Optional[int]]] = [(root, None)]

    while stack:
        current, parent = stack.pop()
        if current is target:
            return _ancestors(chain, parent)

        chain.append((current, parent))
        index = len(chain) - 1
        for child in reversed(children_of_node(current)):
            stack.append((child, index))

    logger.debug(f"{target!r} not found under {root!r}")
    return None


def parents_of_node(target: Any, root: Any) -> List[Any]:
    """Return target's ancestors nearest-first, or [] if it is not in the tree."""
    path = path_to_node(target, root)
    if path is None:
        return []
    return list(reversed(path))
