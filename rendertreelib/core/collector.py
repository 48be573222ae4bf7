"""Data collection strategies for RenderTreeLib.

DataCollectors define what information to extract from each unit during
traversal, so one walk can return labels, props or whole nodes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from .children import children_of_node
from .label import get_text_from_node
from .node import RenderNode
from .props import props_of_node


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, get_children: Optional[Callable[[Any], List[Any]]] = None):
        """Initialize collector.

        Args:
            get_children: Callable returning a unit's ordered children
                (default: ``children_of_node``)
        """
        self.get_children = get_children or children_of_node

    @abstractmethod
    def collect(self, node: Any, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node (or text leaf) to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class FullNodeCollector(DataCollector):
    """Returns the visited unit itself."""

    def collect(self, node: Any, depth: int) -> Any:
        return node


class DepthCollector(DataCollector):
    """Returns the depth of each unit relative to the traversal root."""

    def collect(self, node: Any, depth: int) -> int:
        return depth


class LabelCollector(DataCollector):
    """Collects the diagnostic label (``<Name />``) of each unit."""

    def collect(self, node: Any, depth: int) -> str:
        return get_text_from_node(node)


class PropsCollector(DataCollector):
    """Collects the defined props of each unit (empty for text leaves)."""

    def collect(self, node: Any, depth: int) -> Dict[str, Any]:
        return props_of_node(node)


class ChildCountCollector(DataCollector):
    """Collects nodes with child count information.

    Useful for tree structure analysis.
    """

    def collect(self, node: Any, depth: int) -> Dict[str, Any]:
        child_count = len(self.get_children(node))
        return {
            'label': get_text_from_node(node),
            'depth': depth,
            'child_count': child_count,
            'is_leaf': child_count == 0,
            'is_text': not isinstance(node, RenderNode),
        }


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[Any, int], Any],
                 get_children: Optional[Callable[[Any], List[Any]]] = None):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
            get_children: Optional children getter
        """
        super().__init__(get_children)
        self.collect_func = collect_func

    def collect(self, node: Any, depth: int) -> Any:
        return self.collect_func(node, depth)
