"""Core abstractions and query primitives for RenderTreeLib."""

from .node import RenderNode, NodeType, UNDEFINED
from .adapter import RenderAdapter
from .children import ChildShape, classify_child, normalize_children, children_of_node, is_non_renderable
from .traverser import TreeTraverser, DepthFirstPreOrderTraverser, BreadthFirstTraverser, create_traverser
from .path import path_to_node, parents_of_node
from .props import props_of_node, same_value, node_has_property, node_has_id, node_matches_object_props
from .classes import has_class_name
from .label import display_name_of_kind, get_text_from_node, node_has_type
from .collector import DataCollector

__all__ = [
    "RenderNode",
    "NodeType",
    "UNDEFINED",
    "RenderAdapter",
    "ChildShape",
    "classify_child",
    "normalize_children",
    "children_of_node",
    "is_non_renderable",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "path_to_node",
    "parents_of_node",
    "props_of_node",
    "same_value",
    "node_has_property",
    "node_has_id",
    "node_matches_object_props",
    "has_class_name",
    "display_name_of_kind",
    "get_text_from_node",
    "node_has_type",
    "DataCollector",
]
