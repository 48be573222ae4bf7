"""High-level API for RenderTreeLib.

This module provides simple, functional interfaces for walking and querying
render trees. ``tree_for_each``, ``tree_filter`` and ``path_to_node`` are the
primitives a selector layer builds on; the rest wrap ExecutionPlan for
common cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
    TraversalStrategy,
    parse_strategy,
)
from .core.traverser import DepthFirstPreOrderTraverser
from .planning import ExecutionPlan


def tree_for_each(root: Any, visit: Callable[[Any], Any]) -> None:
    """Call ``visit`` on every unit of the tree in pre-order.

    The root is visited first, then each normalized child left to right,
    depth-first. Leaves and text units are visited too. An absent root
    visits nothing. Tree depth is not bounded by the recursion limit.

    Args:
        root: Root of the tree
        visit: Callable receiving each unit; its return value is ignored

    Example:
        >>> tree_for_each(tree, lambda node: print(get_text_from_node(node)))
    """
    for node, _ in DepthFirstPreOrderTraverser().traverse(root):
        visit(node)


def tree_filter(root: Any, predicate: Callable[[Any], Any]) -> List[Any]:
    """Return every unit for which ``predicate`` is truthy, in pre-order.

    Args:
        root: Root of the tree
        predicate: Called once per unit

    Returns:
        List of matching units (may be empty)

    Example:
        >>> buttons = tree_filter(tree, lambda n: getattr(n, 'kind', None) == 'button')
    """
    results = []

    def _keep(node: Any) -> None:
        if predicate(node):
            results.append(node)

    tree_for_each(root, _keep)
    return results


def traverse_tree(
    root: Any,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Any], Any]] = None,
    exclude_filter: Optional[Callable[[Any], Any]] = None,
    **kwargs
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (dfs_pre, bfs)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if a unit should be included
        exclude_filter: Function to determine if a unit should be excluded
        **kwargs: Additional TraversalConfig attributes

    Yields:
        Units that match the criteria

    Example:
        >>> for node in traverse_tree(tree, strategy="bfs", max_depth=1):
        ...     print(get_text_from_node(node))
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter
        ),
    )
    _apply_kwargs(config, kwargs)

    plan = ExecutionPlan(config)
    for node, _ in plan.execute(root):
        yield node


def collect_tree_data(
    root: Any,
    data_requirement: DataRequirement = DataRequirement.LABEL,
    **kwargs
) -> Iterator[Tuple[Any, Any]]:
    """Traverse tree and collect specified data.

    Args:
        root: Starting node for traversal
        data_requirement: What data to collect
        **kwargs: Additional traversal options (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)

    Example:
        >>> for node, label in collect_tree_data(tree):
        ...     print(label)
    """
    config = _build_config_from_kwargs(data_requirement=data_requirement, **kwargs)
    plan = ExecutionPlan(config)
    yield from plan.execute(root)


def count_nodes(root: Any, **kwargs) -> int:
    """Count units in a tree that match criteria (see traverse_tree)."""
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(root: Any, predicate: Callable[[Any], Any], **kwargs) -> Iterator[Any]:
    """Lazily find units that match a predicate.

    Same results as ``tree_filter`` for the default strategy, but accepts
    the traversal options of ``traverse_tree``.
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_leaf_nodes(root: Any, **kwargs) -> Iterator[Any]:
    """Get all units with no normalized children."""
    for node, info in collect_tree_data(
        root, data_requirement=DataRequirement.CHILDREN_COUNT, **kwargs
    ):
        if info['is_leaf']:
            yield node


def get_tree_stats(root: Any, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total, leaf, text and internal unit counts,
        maximum depth and per-depth counts

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'text_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for _, info in collect_tree_data(
        root, data_requirement=DataRequirement.CHILDREN_COUNT, **kwargs
    ):
        depth = info['depth']
        stats['total_nodes'] += 1

        if info['is_leaf']:
            stats['leaf_nodes'] += 1
        if info['is_text']:
            stats['text_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


# Helper functions

def _apply_kwargs(config: TraversalConfig, kwargs: Dict[str, Any]) -> None:
    # Power users can set any TraversalConfig attribute directly
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments."""
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    _apply_kwargs(config, kwargs)
    return config
