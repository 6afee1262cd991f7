"""
Document tree for the render engine.
"""

from .node import Node, NodeType, Element, Text, Comment, dump_tree

__all__ = ['Node', 'NodeType', 'Element', 'Text', 'Comment', 'dump_tree']
