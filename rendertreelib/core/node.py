"""RenderNode abstraction for RenderTreeLib.

The RenderNode is intentionally kept simple - it's a data container describing
one rendered unit. Getting from a node to its children is the job of the
child normalizer, which knows every legal shape of the ``rendered`` slot.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class _Undefined:
    """Marker for a slot that holds no value at all.

    Distinct from ``None``, which models an explicit null value.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class NodeType(Enum):
    """What kind of rendered unit a node represents."""
    HOST = "host"           # Host element, kind is a tag name
    CLASS = "class"         # Class component instance
    FUNCTION = "function"   # Function component


@dataclass(eq=False)
class RenderNode:
    """One node of a normalized render tree.

    Nodes compare and hash by identity: two structurally identical nodes are
    still different nodes. The ``rendered`` slot may hold a single node, a
    nested sequence, a set, a mapping, a primitive or nothing at all.

    The engine treats a tree as read-only for the duration of any operation.
    """

    node_type: NodeType
    kind: Any
    props: Dict[str, Any] = field(default_factory=dict)
    key: Optional[Any] = None
    ref: Any = None
    instance: Any = None
    rendered: Any = UNDEFINED

    def is_host(self) -> bool:
        """Check if this node is a host element (e.g. ``div``)."""
        return self.node_type is NodeType.HOST

    def __repr__(self) -> str:
        """Short representation that does not recurse into children."""
        kind = self.kind if isinstance(self.kind, str) else getattr(self.kind, "__name__", self.kind)
        if self.key is not None:
            return f"{self.__class__.__name__}(kind={kind!r}, key={self.key!r})"
        return f"{self.__class__.__name__}(kind={kind!r})"
