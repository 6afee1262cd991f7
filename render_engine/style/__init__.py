"""
Style resolution for the render engine.
"""

from .styled_node import Display, StyledNode, dump_style_tree, specified_values, style_tree

__all__ = ['Display', 'StyledNode', 'dump_style_tree', 'specified_values', 'style_tree']
