"""Test fixtures for RenderTreeLib consumers.

A tiny element model and a matching RenderAdapter, so test suites can build
render trees without a UI framework:

    tree = to_tree(h("div", None, h("button"), h("nav", None, h("input"))))
"""

from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..core.adapter import RenderAdapter
from ..core.node import RenderNode, UNDEFINED


@dataclass(eq=False)
class Element:
    """Framework-neutral element description.

    ``props`` may hold a ``children`` entry in any children-slot shape.
    """

    kind: Any
    props: Dict[str, Any] = field(default_factory=dict)
    key: Optional[Any] = None
    ref: Any = None


def h(kind: Any, props: Optional[Dict[str, Any]] = None, *children: Any,
      key: Optional[Any] = None, ref: Any = None) -> Element:
    """Build an Element, hyperscript style.

    A single positional child is stored as-is; several are stored as a list.
    Passing no children leaves ``props['children']`` untouched.
    """
    element_props = dict(props or {})
    if len(children) == 1:
        element_props['children'] = children[0]
    elif children:
        element_props['children'] = list(children)
    return Element(kind, element_props, key=key, ref=ref)


class ElementTreeAdapter(RenderAdapter):
    """Converts Element descriptions into RenderNode trees.

    Containers in a children slot keep their shape: lists and tuples stay
    as they are, mappings keep their keys and sets become insertion-ordered
    key views (or lists, when a member such as a nested set is unhashable).
    ``children`` is moved out of props into ``rendered``.
    """

    def is_valid_element(self, element: Any) -> bool:
        return isinstance(element, Element)

    def element_to_tree(self, element: Any) -> Any:
        if not self.is_valid_element(element):
            return self._convert_slot(element)

        props = dict(element.props)
        children = props.pop('children', UNDEFINED)
        return RenderNode(
            node_type=self.node_type_from_kind(element.kind),
            kind=element.kind,
            props=props,
            key=element.key,
            ref=element.ref,
            rendered=self._convert_slot(children),
        )

    def _convert_slot(self, value: Any) -> Any:
        if self.is_valid_element(value):
            return self.element_to_tree(value)
        if isinstance(value, (str, bytes, bytearray)):
            return value
        if isinstance(value, Mapping):
            return {k: self._convert_slot(v) for k, v in value.items()}
        if isinstance(value, Set):
            members = [self._convert_slot(v) for v in value]
            try:
                return dict.fromkeys(members).keys()
            except TypeError:
                # Unhashable members (nested sets, lists) keep set order in a list
                return members
        if isinstance(value, tuple):
            return tuple(self._convert_slot(v) for v in value)
        if isinstance(value, Sequence):
            return [self._convert_slot(v) for v in value]
        return value


def to_tree(element: Any) -> Any:
    """Convert an element with the default ElementTreeAdapter."""
    return ElementTreeAdapter().element_to_tree(element)
