"""
Loaders that build the engine's input trees from markup and stylesheet text.
"""

from .html_parser import HTMLParser
from .css_parser import CSSParser

__all__ = ['HTMLParser', 'CSSParser']
