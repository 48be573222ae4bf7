"""Execution planning for RenderTreeLib.

The ExecutionPlan validates a TraversalConfig and coordinates the actual
traversal: traverser, filters and collector.
"""

import logging
from typing import Any, Dict, Iterator, Tuple

from .config import ConfigurationError, DataRequirement, TraversalConfig, TraversalStrategy
from .core.collector import (
    ChildCountCollector,
    DataCollector,
    DepthCollector,
    FullNodeCollector,
    LabelCollector,
    PropsCollector,
)
from .core.traverser import TreeTraverser, create_traverser

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for render tree traversal.

    Configuration errors are reported before any node is visited.
    Exceptions raised by caller-supplied filters or collectors propagate.
    """

    def __init__(self, config: TraversalConfig):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()
        self.nodes_processed = 0

        logger.debug(f"Execution plan ready: {self.get_summary()}")

    def _select_traverser(self) -> TreeTraverser:
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser
        return create_traverser(self.config.strategy.value, self.config.get_children)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.FULL_NODE: FullNodeCollector,
            DataRequirement.LABEL: LabelCollector,
            DataRequirement.PROPS: PropsCollector,
            DataRequirement.DEPTH: DepthCollector,
            DataRequirement.CHILDREN_COUNT: ChildCountCollector,
        }

        collector_class = collector_map[self.config.data_requirements]
        return collector_class(self.config.get_children)

    def execute(self, root: Any) -> Iterator[Tuple[Any, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if not self.config.filter.should_include(node):
                continue

            if not self.config.depth.should_yield(depth):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan."""
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
