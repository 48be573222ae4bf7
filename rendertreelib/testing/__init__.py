"""Testing utilities for RenderTreeLib consumers."""

from .fixtures import Element, ElementTreeAdapter, h, to_tree

__all__ = ['Element', 'ElementTreeAdapter', 'h', 'to_tree']
