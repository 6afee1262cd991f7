"""
Layout engine for the render engine.
This package computes box model geometry for the styled tree.
"""

from .box_metrics import Dimensions, EdgeSizes, Rectangle
from .layout import (BoxType, LayoutBox, UnsupportedUnitError, build_layout_tree,
                     dump_layout_tree, layout_tree, resolve_length)

__all__ = [
    'Dimensions', 'EdgeSizes', 'Rectangle',
    'BoxType', 'LayoutBox', 'UnsupportedUnitError', 'build_layout_tree',
    'dump_layout_tree', 'layout_tree', 'resolve_length',
]
