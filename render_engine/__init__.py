"""
Render Engine - the styling and layout core of a minimal document renderer.

Resolves stylesheet rules against a document tree, computes box model
geometry and flattens it into a list of paint commands.
"""

# Package information
__version__ = "0.1.0"
__description__ = "Styling, layout and paint list core of a minimal document renderer"

from render_engine.core import RenderEngine, render_document
from render_engine.css import Color, Length, Stylesheet, Unit
from render_engine.layout import Dimensions, LayoutBox, UnsupportedUnitError, layout_tree
from render_engine.rendering import SolidRectangle, build_display_list
from render_engine.style import StyledNode, style_tree

__all__ = [
    'RenderEngine', 'render_document',
    'Color', 'Length', 'Stylesheet', 'Unit',
    'Dimensions', 'LayoutBox', 'UnsupportedUnitError', 'layout_tree',
    'SolidRectangle', 'build_display_list',
    'StyledNode', 'style_tree',
]
