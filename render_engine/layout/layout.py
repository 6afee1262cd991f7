"""
Layout engine implementation.
This module builds the layout tree from the styled tree and computes the
absolute box model geometry of every box in a single downward pass.
"""

import logging
from enum import Enum
from typing import Iterator, List, Optional

from ..css.values import Length, Unit
from ..style import Display, StyledNode
from .box_metrics import Dimensions

logger = logging.getLogger(__name__)


class BoxType(Enum):
    """Box type of a layout box, derived from the display property."""
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    SUPPRESSED = "none"


DISPLAY_BOX_TYPES = {
    Display.BLOCK: BoxType.BLOCK,
    Display.INLINE: BoxType.INLINE,
    Display.INLINE_BLOCK: BoxType.INLINE_BLOCK,
    Display.NONE: BoxType.SUPPRESSED,
}


class UnsupportedUnitError(NotImplementedError):
    """Raised when layout meets a length unit it cannot measure."""
    
    def __init__(self, property_name: str, unit: Unit):
        self.property_name = property_name
        self.unit = unit
        super().__init__(f"Unsupported unit '{unit.value}' for property '{property_name}': "
                         f"only px and % lengths can be laid out")


def box_type_for(styled_node: StyledNode) -> BoxType:
    return DISPLAY_BOX_TYPES[styled_node.display()]


def resolve_length(styled_node: StyledNode, name: str, containing_block: Dimensions) -> Optional[float]:
    """
    Resolve a length property to pixels.
    
    Args:
        styled_node: Node whose property is read
        name: Property name
        containing_block: Containing block; percentages are taken of its content width
    
    Returns:
        The length in pixels, or None if the property is absent or not a length
    
    Raises:
        UnsupportedUnitError: if the length uses a unit other than px or %
    """
    value = styled_node.value(name)
    if not isinstance(value, Length):
        return None
    if value.unit == Unit.PX:
        return value.value
    if value.unit == Unit.PCT:
        return value.value * containing_block.content.width / 100
    raise UnsupportedUnitError(name, value.unit)


class LayoutBox:
    """
    Layout box for a styled node.
    
    Holds the computed geometry of the node and the boxes of its visible children.
    """
    
    def __init__(self, box_type: BoxType, styled_node: StyledNode):
        """
        Initialize a layout box.
        
        Args:
            box_type: Block, inline or inline-block
            styled_node: The styled node this box was built from
        """
        self.dimensions = Dimensions()
        self.box_type = box_type
        self.styled_node = styled_node
        self.children: List[LayoutBox] = []
    
    @classmethod
    def layout_tree(cls, root: StyledNode, containing_block: Dimensions) -> Optional['LayoutBox']:
        """
        Build and lay out the layout tree for a styled tree.
        
        Args:
            root: Root of the styled tree
            containing_block: Initial containing block (the viewport); not modified
        
        Returns:
            The laid out root box, or None if the root itself has display: none
        """
        containing_block = containing_block.copy()
        # Height grows as children are laid out
        containing_block.content.height = 0.0
        
        root_box = build_layout_tree(root)
        if root_box is not None:
            root_box.layout(containing_block)
        return root_box
    
    def layout(self, containing_block: Dimensions) -> None:
        """
        Lay out this box and its descendants.
        
        Args:
            containing_block: Dimensions of the parent at the time of layout,
                including its accumulated content height and row cursor
        """
        self.dimensions = Dimensions()
        
        # Inline boxes have no flow of their own and are laid out as blocks
        if self.box_type in (BoxType.BLOCK, BoxType.INLINE):
            self.layout_block(containing_block)
        elif self.box_type == BoxType.INLINE_BLOCK:
            self.layout_inline_block(containing_block)
    
    def layout_block(self, containing_block: Dimensions) -> None:
        self.calculate_block_width(containing_block)
        self.calculate_block_position(containing_block)
        self.layout_children()
        self.calculate_height(containing_block)
    
    def layout_inline_block(self, containing_block: Dimensions) -> None:
        self.calculate_inline_width(containing_block)
        self.calculate_inline_position(containing_block)
        self.layout_children()
        self.calculate_height(containing_block)
    
    def calculate_block_width(self, containing_block: Dimensions) -> None:
        """
        Resolve content width and horizontal edges of a block box.
        
        A declared width of 0 is treated the same as an unset width. A margin
        that is absent or not a length (e.g. ``auto``) is unset and absorbs the
        space left over in the containing block. An auto width block keeps a
        zero left margin; its declared left margin only narrows the content.
        """
        d = self.dimensions
        
        width = self._length('width', containing_block) or 0.0
        margin_left = self._length('margin-left', containing_block)
        margin_right = self._length('margin-right', containing_block)
        margin_left_num = margin_left if margin_left is not None else 0.0
        margin_right_num = margin_right if margin_right is not None else 0.0
        
        d.border.left = self._length('border-left-width', containing_block) or 0.0
        d.border.right = self._length('border-right-width', containing_block) or 0.0
        d.padding.left = self._length('padding-left', containing_block) or 0.0
        d.padding.right = self._length('padding-right', containing_block) or 0.0
        
        total = (width + margin_left_num + margin_right_num
                 + d.border.left + d.border.right
                 + d.padding.left + d.padding.right)
        underflow = containing_block.content.width - total
        
        if width != 0 and margin_left is None and margin_right is not None:
            d.margin.left = underflow
            d.margin.right = margin_right_num
            d.content.width = width
        elif width != 0 and margin_left is not None and margin_right is None:
            d.margin.left = margin_left_num
            d.margin.right = underflow
            d.content.width = width
        elif width != 0 and margin_left is None and margin_right is None:
            d.margin.left = underflow / 2
            d.margin.right = underflow / 2
            d.content.width = width
        elif width == 0:
            if underflow >= 0:
                d.content.width = underflow
                d.margin.right = margin_right_num
            else:
                # Overconstrained: the right margin goes negative
                d.content.width = width
                d.margin.right = margin_right_num + underflow
        else:
            d.margin.left = margin_left_num
            d.margin.right = margin_right_num + underflow
            d.content.width = width
    
    def calculate_block_position(self, containing_block: Dimensions) -> None:
        """Place a block box directly below the content already in its container."""
        d = self.dimensions
        self._calculate_vertical_edges(containing_block)
        
        d.content.x = (containing_block.content.x
                       + d.margin.left + d.border.left + d.padding.left)
        d.content.y = (containing_block.content.y + containing_block.content.height
                       + d.margin.top + d.border.top + d.padding.top)
    
    def calculate_inline_width(self, containing_block: Dimensions) -> None:
        """Inline-block boxes take their declared width and edges verbatim."""
        d = self.dimensions
        
        d.content.width = self._length('width', containing_block) or 0.0
        d.margin.left = self._length('margin-left', containing_block) or 0.0
        d.margin.right = self._length('margin-right', containing_block) or 0.0
        d.border.left = self._length('border-left-width', containing_block) or 0.0
        d.border.right = self._length('border-right-width', containing_block) or 0.0
        d.padding.left = self._length('padding-left', containing_block) or 0.0
        d.padding.right = self._length('padding-right', containing_block) or 0.0
    
    def calculate_inline_position(self, containing_block: Dimensions) -> None:
        """Place an inline-block box at the container's row cursor."""
        d = self.dimensions
        self._calculate_vertical_edges(containing_block)
        
        d.content.x = (containing_block.content.x + containing_block.current.x
                       + d.margin.left + d.border.left + d.padding.left)
        d.content.y = (containing_block.content.y + containing_block.content.height
                       + d.margin.top + d.border.top + d.padding.top)
    
    def _calculate_vertical_edges(self, containing_block: Dimensions) -> None:
        d = self.dimensions
        d.margin.top = self._length('margin-top', containing_block) or 0.0
        d.margin.bottom = self._length('margin-bottom', containing_block) or 0.0
        d.border.top = self._length('border-top-width', containing_block) or 0.0
        d.border.bottom = self._length('border-bottom-width', containing_block) or 0.0
        d.padding.top = self._length('padding-top', containing_block) or 0.0
        d.padding.bottom = self._length('padding-bottom', containing_block) or 0.0
    
    def layout_children(self) -> None:
        """
        Lay out children in document order.
        
        Block children stack below each other. Runs of inline-block children
        are placed left to right and wrap to a new row when the row cursor
        passes the content width. Siblings must be processed sequentially:
        each one reads the content height and row cursor left by the previous.
        """
        d = self.dimensions
        row_height = 0.0
        prev_box_type = BoxType.BLOCK
        
        for child in self.children:
            if prev_box_type == BoxType.INLINE_BLOCK and child.box_type == BoxType.BLOCK:
                d.content.height += row_height
                d.current.x = 0.0
                row_height = 0.0
            
            child.layout(d.copy())
            
            if child.box_type == BoxType.BLOCK:
                d.content.height += child.dimensions.margin_box().height
            elif child.box_type == BoxType.INLINE_BLOCK:
                d.current.x += child.dimensions.margin_box().width
                
                if d.current.x > d.content.width:
                    # Wrap: start a new row below the tallest box of this one
                    d.content.height += row_height
                    d.current.x = 0.0
                    row_height = 0.0
                    child.layout(d.copy())
                    d.current.x += child.dimensions.margin_box().width
                
                row_height = max(row_height, child.dimensions.margin_box().height)
            
            prev_box_type = child.box_type
    
    def calculate_height(self, containing_block: Dimensions) -> None:
        """An explicit height wins over the height accumulated from children."""
        height = self._length('height', containing_block)
        if height is not None:
            self.dimensions.content.height = height
    
    def _length(self, name: str, containing_block: Dimensions) -> Optional[float]:
        return resolve_length(self.styled_node, name, containing_block)
    
    def iter_boxes(self) -> Iterator['LayoutBox']:
        """Iterate over this box and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_boxes()
    
    def __repr__(self):
        return f"LayoutBox({self.box_type.value}, {self.styled_node.node!r}, {self.dimensions!r})"


def build_layout_tree(styled_node: StyledNode) -> Optional[LayoutBox]:
    """
    Build the layout tree for a styled node.
    
    Nodes with display: none produce no box and their subtrees are skipped.
    
    Args:
        styled_node: Root of the styled subtree
    
    Returns:
        The root layout box, or None if the node is suppressed
    """
    box_type = box_type_for(styled_node)
    if box_type == BoxType.SUPPRESSED:
        return None
    
    layout_box = LayoutBox(box_type, styled_node)
    for child in styled_node.children:
        child_box = build_layout_tree(child)
        if child_box is not None:
            layout_box.children.append(child_box)
    return layout_box


def layout_tree(root: StyledNode, containing_block: Dimensions) -> Optional[LayoutBox]:
    """Build and lay out the layout tree; see LayoutBox.layout_tree."""
    return LayoutBox.layout_tree(root, containing_block)


def dump_layout_tree(layout_box: LayoutBox, level: int = 0) -> str:
    """
    Produce an indented debug dump of a layout tree.
    """
    lines = [f"{'  ' * level}{layout_box.box_type.value} {layout_box.styled_node.node!r} "
             f"{layout_box.dimensions!r}"]
    for child in layout_box.children:
        lines.append(dump_layout_tree(child, level + 1))
    return "\n".join(lines)
