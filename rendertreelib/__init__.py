"""RenderTreeLib - Render Tree Traversal and Query Library.

RenderTreeLib walks and inspects normalized render trees: host elements,
component instances and text, with their props and already-rendered
children. It never renders anything itself; an adapter builds the tree and
RenderTreeLib answers questions about it.

Query primitives:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from rendertreelib import tree_for_each, tree_filter, path_to_node
    from rendertreelib import node_has_property, has_class_name, get_text_from_node
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.node import RenderNode, NodeType, UNDEFINED
from .core.adapter import RenderAdapter
from .core.children import (
    ChildShape,
    classify_child,
    normalize_children,
    children_of_node,
    is_non_renderable,
)
from .core.traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .core.path import path_to_node, parents_of_node
from .core.props import (
    props_of_node,
    same_value,
    node_has_property,
    node_has_id,
    node_matches_object_props,
)
from .core.classes import has_class_name
from .core.label import display_name_of_kind, get_text_from_node, node_has_type
from .core.collector import (
    DataCollector,
    FullNodeCollector,
    DepthCollector,
    LabelCollector,
    PropsCollector,
    ChildCountCollector,
    CustomCollector,
)

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
    ConfigurationError,
)
from .planning import ExecutionPlan

# High-level API
from .api import (
    tree_for_each,
    tree_filter,
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    '__version__',
    # Core
    'RenderNode',
    'NodeType',
    'UNDEFINED',
    'RenderAdapter',
    'ChildShape',
    'classify_child',
    'normalize_children',
    'children_of_node',
    'is_non_renderable',
    'TreeTraverser',
    'DepthFirstPreOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'path_to_node',
    'parents_of_node',
    'props_of_node',
    'same_value',
    'node_has_property',
    'node_has_id',
    'node_matches_object_props',
    'has_class_name',
    'display_name_of_kind',
    'get_text_from_node',
    'node_has_type',
    'DataCollector',
    'FullNodeCollector',
    'DepthCollector',
    'LabelCollector',
    'PropsCollector',
    'ChildCountCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'ConfigurationError',
    'ExecutionPlan',
    # API
    'tree_for_each',
    'tree_filter',
    'traverse_tree',
    'collect_tree_data',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
