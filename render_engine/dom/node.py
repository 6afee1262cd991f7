"""
Document tree implementation.
This module implements the element, text and comment nodes consumed by style resolution.
"""

from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Set


class NodeType(IntEnum):
    """Node types, numbered as in the W3C DOM."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8


class Node:
    """
    Base node of the document tree.
    
    A node owns its children exclusively. Trees are built once by a loader
    and treated as read-only afterwards.
    """
    
    def __init__(self, node_type: NodeType, children: Optional[Iterable['Node']] = None):
        """
        Initialize a new Node.
        
        Args:
            node_type: The type of this node
            children: Child nodes in document order
        """
        self.node_type = node_type
        self.children: List['Node'] = list(children) if children else []
    
    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE
    
    @property
    def element_children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.children if child.is_element]
    
    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.
        
        Args:
            child: The node to append
        
        Returns:
            The appended node
        """
        self.children.append(child)
        return child


class Element(Node):
    """
    Element node with a tag name and attributes.
    """
    
    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Dict[str, str]] = None,
                 children: Optional[Iterable[Node]] = None):
        """
        Initialize a new Element.
        
        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Attribute name to value mapping
            children: Child nodes in document order
        """
        super().__init__(NodeType.ELEMENT_NODE, children)
        
        self.tag_name = tag_name.lower()
        self.attributes: Dict[str, str] = {
            name.lower(): value for name, value in (attributes or {}).items()
        }
    
    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name.lower(), default)
    
    @property
    def id(self) -> Optional[str]:
        """The id attribute, or None when the element has none."""
        return self.attributes.get('id')
    
    @property
    def class_list(self) -> Set[str]:
        """Get the set of classes applied to this element."""
        class_attr = self.attributes.get('class') or ""
        return {cls for cls in class_attr.split() if cls}
    
    def __repr__(self):
        attrs = "".join(f' {name}="{value}"' for name, value in self.attributes.items())
        return f"<{self.tag_name}{attrs}>"


class Text(Node):
    """Text node. Text carries no box and is dropped by style resolution."""
    
    def __init__(self, data: str):
        super().__init__(NodeType.TEXT_NODE)
        self.data = data if data is not None else ""
    
    def __repr__(self):
        return f"Text({self.data!r})"


class Comment(Node):
    """Comment node."""
    
    def __init__(self, data: str):
        super().__init__(NodeType.COMMENT_NODE)
        self.data = data if data is not None else ""
    
    def __repr__(self):
        return f"Comment({self.data!r})"


def dump_tree(node: Node, indent_size: int = 0) -> str:
    """
    Produce an indented debug dump of a document tree.
    
    Args:
        node: Root of the subtree to dump
        indent_size: Indentation of the root line
    
    Returns:
        The dump, one node per line
    """
    lines: List[str] = []
    _dump(node, indent_size, lines)
    return "\n".join(lines)


def _dump(node: Node, indent_size: int, lines: List[str]) -> None:
    indent = " " * indent_size
    
    if node.node_type == NodeType.TEXT_NODE:
        lines.append(f"{indent}{node.data}")
    elif node.node_type == NodeType.COMMENT_NODE:
        lines.append(f"{indent}<!--{node.data}-->")
    else:
        lines.append(f"{indent}{node!r}")
    
    for child in node.children:
        _dump(child, indent_size + 2, lines)
    
    if node.is_element:
        lines.append(f"{indent}</{node.tag_name}>")
