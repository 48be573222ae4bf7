"""Tree traversal strategies for RenderTreeLib.

Traversers implement different orders for walking a render tree. Children
are read through a ``get_children`` callable, which defaults to the child
normalizer, so every legal children-slot shape is walked the same way.

Trees are assumed acyclic: adapters build them bottom-up, so traversers do
not track visited nodes.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterator, List, Optional, Tuple

from .children import children_of_node, is_non_renderable


ChildrenGetter = Callable[[Any], List[Any]]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers are independent of how children are stored; they only ask
    ``get_children`` for the ordered children of each unit.
    """

    def __init__(self, get_children: Optional[ChildrenGetter] = None):
        """Initialize traverser.

        Args:
            get_children: Callable returning a unit's ordered children
                (default: ``children_of_node``)
        """
        self.get_children = get_children or children_of_node

    @abstractmethod
    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        An absent or non-renderable root yields nothing.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node, then each of its children left to right. This is the
    order every query primitive in the library is defined against.

    Uses an explicit stack, so tree depth is not bounded by the interpreter's
    recursion limit.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse tree depth-first, pre-order."""
        if is_non_renderable(root):
            return

        stack: List[Tuple[Any, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            # Yield parent first (pre-order)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Reversed so the leftmost child is popped first
                children = list(self.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all units at depth N before any unit at depth N+1, left to right
    within a level.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse tree breadth-first."""
        if is_non_renderable(root):
            return

        queue: Deque[Tuple[Any, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.get_children(node):
                    queue.append((child, depth + 1))


def create_traverser(strategy: str, get_children: Optional[ChildrenGetter] = None) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (dfs_pre, bfs)
        get_children: Optional children getter passed to the traverser

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](get_children)
