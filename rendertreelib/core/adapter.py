"""RenderAdapter abstraction for RenderTreeLib.

The traversal engine never renders anything. A RenderAdapter is the bridge
from a framework's own element/render output to RenderNode trees, and the
engine only consumes what it builds.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any

from .node import NodeType, RenderNode
from .label import display_name_of_kind


class RenderAdapter(ABC):
    """Abstract adapter that turns framework elements into RenderNode trees.

    Each framework supplies its own adapter. Trees must be built bottom-up,
    so a node never appears inside its own ``rendered`` slot; the traversal
    functions rely on this and do not look for cycles.
    """

    @abstractmethod
    def element_to_tree(self, element: Any) -> Any:
        """Build a RenderNode tree from a framework element.

        Values that are not elements (text, numbers, None) should be
        returned unchanged so they can sit in a children slot.

        Args:
            element: Framework-specific element description

        Returns:
            RenderNode, or the value itself when it is not an element
        """
        pass

    @abstractmethod
    def is_valid_element(self, element: Any) -> bool:
        """Check if a value is an element this adapter can convert.

        Returns:
            True if ``element_to_tree`` would produce a RenderNode
        """
        pass

    def node_type_from_kind(self, kind: Any) -> NodeType:
        """Classify an element kind.

        Default: strings are host tags, classes are class components and any
        other callable is a function component.

        Raises:
            TypeError: If the kind is neither a string nor callable
        """
        if isinstance(kind, str):
            return NodeType.HOST
        if inspect.isclass(kind):
            return NodeType.CLASS
        if callable(kind):
            return NodeType.FUNCTION
        raise TypeError(f"Unsupported element kind: {kind!r}")

    def display_name_of_node(self, node: RenderNode) -> str:
        """Return the display name used for a node in diagnostics.

        Adapters can override this for frameworks with their own naming
        rules (e.g. wrapper components).
        """
        return display_name_of_kind(node.kind)
