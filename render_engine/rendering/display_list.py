"""
Display list construction.
This module flattens a laid out tree into an ordered list of paint commands.
Later commands paint over earlier ones.
"""

import logging
from typing import Any, Dict, List, Optional

from ..css.values import Color
from ..layout import LayoutBox, Rectangle

logger = logging.getLogger(__name__)


class SolidRectangle:
    """Fill a rectangle with a solid color."""
    
    def __init__(self, color: Color, rect: Rectangle):
        self.color = color
        self.rect = rect
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "solid-rectangle",
            "color": self.color.to_dict(),
            "rect": self.rect.to_dict(),
        }
    
    def __eq__(self, other):
        if not isinstance(other, SolidRectangle):
            return NotImplemented
        return self.color == other.color and self.rect == other.rect
    
    def __repr__(self):
        return f"SolidRectangle({self.color!r}, {self.rect!r})"


DisplayCommand = SolidRectangle
DisplayList = List[DisplayCommand]


class DisplayListBuilder:
    """
    Builds the display list for a layout tree.
    
    Boxes are painted in pre-order: background, then the four border edges,
    then the children. There is no clipping and no stacking order other than
    document order.
    """
    
    def __init__(self):
        self.commands: DisplayList = []
    
    def build(self, root: Optional[LayoutBox]) -> DisplayList:
        """
        Build the display list for a layout tree.
        
        Args:
            root: Root layout box, or None for an empty (fully suppressed) document
        
        Returns:
            A copy of the accumulated commands
        """
        if root is not None:
            self.render_layout_box(root)
        logger.debug(f"Display list has {len(self.commands)} commands")
        return list(self.commands)
    
    def render_layout_box(self, layout_box: LayoutBox) -> None:
        self.render_background(layout_box)
        self.render_borders(layout_box)
        
        for child in layout_box.children:
            self.render_layout_box(child)
    
    def render_background(self, layout_box: LayoutBox) -> None:
        color = get_color(layout_box, 'background-color')
        if color is not None:
            self.commands.append(SolidRectangle(color, layout_box.dimensions.border_box()))
    
    def render_borders(self, layout_box: LayoutBox) -> None:
        color = get_color(layout_box, 'border-color')
        if color is None:
            return
        
        d = layout_box.dimensions
        border_box = d.border_box()
        
        # Left border
        self.commands.append(SolidRectangle(color, Rectangle(
            border_box.x,
            border_box.y,
            d.border.left,
            border_box.height,
        )))
        
        # Right border
        self.commands.append(SolidRectangle(color, Rectangle(
            border_box.x + border_box.width - d.border.right,
            border_box.y,
            d.border.right,
            border_box.height,
        )))
        
        # Top border
        self.commands.append(SolidRectangle(color, Rectangle(
            border_box.x,
            border_box.y,
            border_box.width,
            d.border.top,
        )))
        
        # Bottom border
        self.commands.append(SolidRectangle(color, Rectangle(
            border_box.x,
            border_box.y + border_box.height - d.border.bottom,
            border_box.width,
            d.border.bottom,
        )))


def get_color(layout_box: LayoutBox, name: str) -> Optional[Color]:
    """Return the box's color property, or None if it is absent or not a color."""
    value = layout_box.styled_node.value(name)
    if isinstance(value, Color):
        return value
    return None


def build_display_list(root: Optional[LayoutBox]) -> DisplayList:
    """Build the display list for a layout tree."""
    return DisplayListBuilder().build(root)
