"""
CSS model for the render engine: values, selectors and stylesheets.
"""

from .values import Color, Keyword, Length, Unit, Value
from .selector import Selector, SimpleSelector, SelectorParser, matches_selector
from .stylesheet import Declaration, Rule, Stylesheet

__all__ = [
    'Color', 'Keyword', 'Length', 'Unit', 'Value',
    'Selector', 'SimpleSelector', 'SelectorParser', 'matches_selector',
    'Declaration', 'Rule', 'Stylesheet',
]
