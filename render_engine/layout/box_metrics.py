"""
Box model geometry: rectangles, edge sizes and the nested content, padding,
border and margin boxes of a layout box.
"""

from typing import Dict


class Rectangle:
    """Axis-aligned rectangle in pixels, y-down, origin top-left."""
    
    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
    
    def expanded(self, edges: 'EdgeSizes') -> 'Rectangle':
        """Grow the rectangle outward by the given edge sizes."""
        return Rectangle(
            self.x - edges.left,
            self.y - edges.top,
            self.width + edges.left + edges.right,
            self.height + edges.top + edges.bottom,
        )
    
    def contains(self, other: 'Rectangle') -> bool:
        """Whether other lies entirely inside this rectangle."""
        return (self.x <= other.x and self.y <= other.y
                and other.x + other.width <= self.x + self.width
                and other.y + other.height <= self.y + self.height)
    
    def copy(self) -> 'Rectangle':
        return Rectangle(self.x, self.y, self.width, self.height)
    
    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}
    
    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)
    
    def __repr__(self):
        return f"Rectangle(x={self.x:g}, y={self.y:g}, w={self.width:g}, h={self.height:g})"


class EdgeSizes:
    """Widths of the four edges of a padding, border or margin."""
    
    def __init__(self, left: float = 0.0, right: float = 0.0, top: float = 0.0, bottom: float = 0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom
    
    def copy(self) -> 'EdgeSizes':
        return EdgeSizes(self.left, self.right, self.top, self.bottom)
    
    def __eq__(self, other):
        if not isinstance(other, EdgeSizes):
            return NotImplemented
        return (self.left, self.right, self.top, self.bottom) == (other.left, other.right, other.top, other.bottom)
    
    def __repr__(self):
        return f"EdgeSizes(l={self.left:g}, r={self.right:g}, t={self.top:g}, b={self.bottom:g})"


class Dimensions:
    """
    Box model metrics for a layout box.
    
    The content rectangle is expanded by padding, then border, then margin to
    give the padding, border and margin boxes. ``current`` is the in-row
    cursor used while this box lays out its own children: ``current.x`` is the
    horizontal offset of the next inline-block.
    """
    
    def __init__(self):
        self.content = Rectangle()
        self.padding = EdgeSizes()
        self.border = EdgeSizes()
        self.margin = EdgeSizes()
        self.current = Rectangle()
    
    @classmethod
    def viewport(cls, width: float, height: float) -> 'Dimensions':
        """Dimensions of an initial containing block of the given size."""
        dimensions = cls()
        dimensions.content.width = float(width)
        dimensions.content.height = float(height)
        return dimensions
    
    def padding_box(self) -> Rectangle:
        return self.content.expanded(self.padding)
    
    def border_box(self) -> Rectangle:
        return self.padding_box().expanded(self.border)
    
    def margin_box(self) -> Rectangle:
        return self.border_box().expanded(self.margin)
    
    def copy(self) -> 'Dimensions':
        dimensions = Dimensions()
        dimensions.content = self.content.copy()
        dimensions.padding = self.padding.copy()
        dimensions.border = self.border.copy()
        dimensions.margin = self.margin.copy()
        dimensions.current = self.current.copy()
        return dimensions
    
    def __eq__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return (self.content == other.content and self.padding == other.padding
                and self.border == other.border and self.margin == other.margin
                and self.current == other.current)
    
    def __repr__(self):
        return (f"Dimensions(content={self.content!r}, padding={self.padding!r}, "
                f"border={self.border!r}, margin={self.margin!r})")
