"""
HTML parser implementation.
This module parses markup with BeautifulSoup and html5lib and converts the
result into the render engine's document tree.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Comment as SoupComment, NavigableString, PreformattedString, Tag

from ..dom import Comment, Element, Node, Text

logger = logging.getLogger(__name__)


class HTMLParser:
    """HTML parser using BeautifulSoup with html5lib for full HTML5 tree building."""
    
    def __init__(self):
        """Initialize the HTML parser."""
        logger.debug("HTML parser initialized")
    
    def parse(self, html_content: str) -> Element:
        """
        Parse HTML content into a document tree.
        
        Args:
            html_content: HTML content to parse
        
        Returns:
            Element: The <html> root element
        """
        if isinstance(html_content, bytes):
            html_content = html_content.decode('utf-8', errors='replace')
        
        soup = BeautifulSoup(html_content or "", 'html5lib')
        root_tag = soup.find('html')
        
        root = self._convert_tag(root_tag)
        logger.debug(f"Parsed document with root <{root.tag_name}>")
        return root
    
    def _convert_tag(self, tag: Tag) -> Element:
        attributes = {}
        for name, value in tag.attrs.items():
            # Multi-valued attributes such as class come back as lists
            if isinstance(value, (list, tuple)):
                value = ' '.join(value)
            attributes[name] = value
        
        element = Element(tag.name, attributes)
        for child in tag.children:
            node = self._convert_node(child)
            if node is not None:
                element.append_child(node)
        return element
    
    def _convert_node(self, soup_node) -> Optional[Node]:
        if isinstance(soup_node, Tag):
            return self._convert_tag(soup_node)
        if isinstance(soup_node, SoupComment):
            return Comment(str(soup_node))
        # Doctypes, CDATA and processing instructions have no place in the tree
        if isinstance(soup_node, PreformattedString):
            return None
        if isinstance(soup_node, NavigableString):
            text = str(soup_node)
            return Text(text) if text.strip() else None
        return None
    
    def extract_stylesheets(self, root: Element) -> str:
        """
        Collect the contents of all <style> elements in document order.
        
        Args:
            root: Root of the document tree
        
        Returns:
            The concatenated stylesheet text
        """
        sources: List[str] = []
        self._collect_styles(root, sources)
        return "\n".join(sources)
    
    def _collect_styles(self, node: Node, sources: List[str]) -> None:
        if node.is_element and node.tag_name == 'style':
            sources.append("".join(child.data for child in node.children if isinstance(child, Text)))
            return
        for child in node.children:
            self._collect_styles(child, sources)
