"""
Style resolution.
This module matches stylesheet rules against document elements and builds the
styled tree that layout consumes.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from ..css.selector import matches_selector
from ..css.stylesheet import Stylesheet
from ..css.values import Keyword, Length, Value
from ..dom import Element, Node

logger = logging.getLogger(__name__)

PropertyMap = Dict[str, Value]


class Display(Enum):
    """CSS display property values understood by layout."""
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    NONE = "none"


class StyledNode:
    """
    A document element paired with the declarations that apply to it.
    
    Property values are shared with the stylesheet's declarations, never copied.
    Only element children are kept; text and comments contribute no box.
    """
    
    def __init__(self, node: Node, specified_values: Optional[PropertyMap] = None,
                 children: Optional[List['StyledNode']] = None):
        self.node = node
        self.specified_values: PropertyMap = specified_values if specified_values is not None else {}
        self.children: List[StyledNode] = children if children is not None else []
    
    def value(self, name: str) -> Optional[Value]:
        """Return the matched value of a property, or None if no rule set it."""
        return self.specified_values.get(name)
    
    def display(self) -> Display:
        """Derive the display type; anything unset or unrecognized is inline."""
        value = self.value('display')
        if isinstance(value, Keyword):
            try:
                return Display(value.text)
            except ValueError:
                return Display.INLINE
        return Display.INLINE
    
    def num_or(self, name: str, default: float) -> float:
        """
        Numeric value of a length property.
        
        Args:
            name: Property name
            default: Value used when the property is absent or not a length
        
        Returns:
            The length's number (unit is not interpreted)
        """
        value = self.value(name)
        if isinstance(value, Length):
            return value.value
        return default
    
    def __repr__(self):
        return f"StyledNode({self.node!r}, {self.specified_values!r})"


def specified_values(element: Element, stylesheet: Stylesheet) -> PropertyMap:
    """
    Collect the declarations that apply to an element.
    
    Rules are scanned in stylesheet order and each rule is applied at most once,
    on its first matching selector. Later rules overwrite earlier ones; selector
    specificity plays no part.
    
    Args:
        element: The element to style
        stylesheet: The stylesheet to match against
    
    Returns:
        Property name to value mapping
    """
    values: PropertyMap = {}
    
    for rule in stylesheet.rules:
        for selector in rule.selectors:
            if matches_selector(selector, element):
                for declaration in rule.declarations:
                    values[declaration.property] = declaration.value
                break
    
    return values


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """
    Build the styled tree for a document.
    
    Args:
        root: Root element of the document tree
        stylesheet: The stylesheet to apply
    
    Returns:
        The styled root node
    """
    values = specified_values(root, stylesheet) if root.is_element else {}
    children = [style_tree(child, stylesheet) for child in root.children if child.is_element]
    return StyledNode(root, values, children)


def dump_style_tree(node: StyledNode, indent_size: int = 0) -> str:
    """
    Produce an indented debug dump of a styled tree.
    """
    lines = [f"{' ' * indent_size}{node.node!r}: {node.specified_values!r}"]
    for child in node.children:
        lines.append(dump_style_tree(child, indent_size + 2))
    return "\n".join(lines)
