"""Configuration system for RenderTreeLib.

This module defines how callers specify a traversal: the order to walk in,
how deep to go, which units to keep and what data to collect from them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class ConfigurationError(ValueError):
    """Raised when a TraversalConfig is inconsistent."""
    pass


class DataRequirement(Enum):
    """Specifies what data is collected from each visited unit."""
    FULL_NODE = "full"              # The node itself
    LABEL = "label"                 # "<Name />" diagnostic label
    PROPS = "props"                 # Defined props
    DEPTH = "depth"                 # Depth relative to root
    CHILDREN_COUNT = "children_count"  # Number of normalized children
    CUSTOM = "custom"               # User-defined collection


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    BREADTH_FIRST = "bfs"           # Level by level
    CUSTOM = "custom"               # User-defined traverser


@dataclass
class FilterConfig:
    """Configuration for filtering units during traversal.

    Filters decide which units are yielded; they never stop the walk from
    descending into a unit's children.
    """

    include_filter: Optional[Callable[[Any], Any]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], Any]] = None  # Exclude predicate

    def should_include(self, node: Any) -> bool:
        """Check if a unit should be yielded based on filters.

        Args:
            node: Unit to check

        Returns:
            True if the unit passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return bool(self.include_filter(node))

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if units at this depth should be yielded."""
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a render tree traversal.

    The ExecutionPlan validates this configuration and assembles the
    traverser and collector it describes.
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    data_requirements: DataRequirement = DataRequirement.FULL_NODE
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Children getter shared by traverser and collector
    get_children: Optional[Callable[[Any], List[Any]]] = None

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for a root-plus-immediate-children scan.

        Args:
            max_depth: How deep to walk (default 1 = immediate children only)
        """
        return cls(depth=DepthConfig(max_depth=max_depth))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors


def parse_strategy(strategy: Any) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
