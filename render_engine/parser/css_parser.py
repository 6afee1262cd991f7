"""
CSS parser implementation.
This module turns stylesheet text into the Stylesheet model, classifying every
declaration value into a Color, Length or Keyword.
"""

import logging
from typing import List, Optional

import tinycss2

from ..css.selector import SelectorParser
from ..css.stylesheet import Declaration, Rule, Stylesheet
from ..css.values import Color, DEFAULT_COLOR, Keyword, Length, NAMED_COLORS, Unit, Value

logger = logging.getLogger(__name__)

COLOR_PROPERTIES = {'background-color', 'border-color', 'color'}

LENGTH_PROPERTIES = {
    'width', 'height',
    'margin-top', 'margin-right', 'margin-bottom', 'margin-left',
    'padding-top', 'padding-right', 'padding-bottom', 'padding-left',
    'border-top-width', 'border-right-width', 'border-bottom-width', 'border-left-width',
}

# Shorthand property -> longhands in top, right, bottom, left order
SHORTHAND_PROPERTIES = {
    'margin': ('margin-top', 'margin-right', 'margin-bottom', 'margin-left'),
    'padding': ('padding-top', 'padding-right', 'padding-bottom', 'padding-left'),
    'border-width': ('border-top-width', 'border-right-width',
                     'border-bottom-width', 'border-left-width'),
}

_IGNORED_TOKEN_TYPES = ('whitespace', 'comment')


class CSSParser:
    """
    Stylesheet parser backed by tinycss2.
    
    Malformed values never raise: they are replaced by documented defaults
    (unknown unit -> px, unknown color keyword -> white, bad hex digit -> 0).
    """
    
    def __init__(self):
        """Initialize the CSS parser."""
        self.selector_parser = SelectorParser()
        logger.debug("CSS Parser initialized")
    
    def parse(self, css_content: str) -> Stylesheet:
        """
        Parse CSS content into a stylesheet.
        
        Args:
            css_content: CSS content to parse
        
        Returns:
            Parsed stylesheet, rules in source order
        """
        stylesheet = Stylesheet()
        
        nodes = tinycss2.parse_stylesheet(css_content or "", skip_comments=True, skip_whitespace=True)
        for node in nodes:
            if node.type == 'qualified-rule':
                selectors = self.selector_parser.parse_tokens(node.prelude)
                declarations = self.parse_declaration_tokens(node.content)
                stylesheet.rules.append(Rule(selectors, declarations))
            elif node.type == 'at-rule':
                logger.debug(f"Skipping unsupported at-rule @{node.lower_at_keyword}")
            elif node.type == 'error':
                logger.debug(f"Skipping malformed CSS at line {node.source_line}: {node.message}")
        
        logger.debug(f"Parsed stylesheet with {len(stylesheet.rules)} rules")
        return stylesheet
    
    def parse_declarations(self, declaration_str: str) -> List[Declaration]:
        """
        Parse a declaration block body such as "width: 10px; color: red".
        
        Args:
            declaration_str: CSS declaration string
        
        Returns:
            Declarations in source order, shorthands expanded
        """
        return self.parse_declaration_tokens(declaration_str or "")
    
    def parse_declaration_tokens(self, tokens) -> List[Declaration]:
        declarations = []
        
        for node in tinycss2.parse_declaration_list(tokens, skip_comments=True, skip_whitespace=True):
            if node.type != 'declaration':
                if node.type == 'error':
                    logger.debug(f"Skipping malformed declaration: {node.message}")
                continue
            
            property_name = node.lower_name
            if property_name in SHORTHAND_PROPERTIES:
                declarations.extend(self._expand_shorthand(property_name, node.value))
            else:
                declarations.append(Declaration(property_name, self.parse_value(property_name, node.value)))
        
        return declarations
    
    def parse_value(self, property_name: str, tokens) -> Value:
        """
        Classify a declaration value by the property it belongs to.
        
        Args:
            property_name: Lower-case property name
            tokens: tinycss2 component values of the declaration value
        
        Returns:
            Color for color properties, Length for length properties, Keyword otherwise
        """
        significant = _significant(tokens)
        
        if property_name in COLOR_PROPERTIES:
            return parse_color_token(significant[0] if significant else None)
        
        if property_name in LENGTH_PROPERTIES:
            return parse_length_token(significant[0] if significant else None)
        
        text = ' '.join(tinycss2.serialize(tokens).split()).lower()
        return Keyword(text)
    
    def _expand_shorthand(self, property_name: str, tokens) -> List[Declaration]:
        components = _significant(tokens)
        if not components:
            logger.debug(f"Ignoring empty shorthand '{property_name}'")
            return []
        if len(components) > 4:
            logger.debug(f"Shorthand '{property_name}' has {len(components)} values, using the first 4")
            components = components[:4]
        
        values = [parse_length_token(token) for token in components]
        
        # CSS box shorthand expansion: top, right, bottom, left
        if len(values) == 1:
            values = values * 4
        elif len(values) == 2:
            values = [values[0], values[1], values[0], values[1]]
        elif len(values) == 3:
            values = [values[0], values[1], values[2], values[1]]
        
        longhands = SHORTHAND_PROPERTIES[property_name]
        return [Declaration(name, value) for name, value in zip(longhands, values)]


def _significant(tokens) -> list:
    return [token for token in tokens or [] if token.type not in _IGNORED_TOKEN_TYPES]


def parse_length_token(token) -> Value:
    """
    Convert a single tinycss2 token into a Length.
    
    Args:
        token: tinycss2 token, or None for an empty value
    
    Returns:
        Length in the token's unit, Keyword("auto") for auto, Length(0, px) otherwise
    """
    if token is None:
        return Length(0, Unit.PX)
    
    if token.type == 'dimension':
        unit = Unit.from_string(token.lower_unit)
        if unit is None:
            logger.debug(f"Unknown length unit '{token.unit}', treating as px")
            unit = Unit.PX
        return Length(token.value, unit)
    
    if token.type == 'percentage':
        return Length(token.value, Unit.PCT)
    
    if token.type == 'number':
        return Length(token.value, Unit.PX)
    
    if token.type == 'ident' and token.lower_value == 'auto':
        return Keyword('auto')
    
    logger.debug(f"Unparseable length '{tinycss2.serialize([token])}', using 0px")
    return Length(0, Unit.PX)


def parse_color_token(token) -> Color:
    """
    Convert a single tinycss2 token into a Color.
    
    Args:
        token: tinycss2 token, or None for an empty value
    
    Returns:
        The parsed color; white for anything unrecognized
    """
    if token is None:
        return DEFAULT_COLOR
    
    if token.type == 'hash':
        return parse_hex_color(token.value)
    
    if token.type == 'ident':
        color = NAMED_COLORS.get(token.lower_value)
        if color is None:
            logger.debug(f"Unknown color keyword '{token.value}', using default")
            return DEFAULT_COLOR
        return color
    
    if token.type == 'function' and token.lower_name in ('rgb', 'rgba'):
        color = _parse_rgb_function(token.arguments)
        if color is not None:
            return color
    
    logger.debug(f"Unsupported color value '{tinycss2.serialize([token])}', using default")
    return DEFAULT_COLOR


def parse_hex_color(digits: str) -> Color:
    """
    Parse the digits of a #rrggbb or #rgb color.
    
    Args:
        digits: Hex digits without the leading '#'
    
    Returns:
        The color; a component with invalid digits is 0, other lengths give white
    """
    if len(digits) == 6:
        components = [digits[0:2], digits[2:4], digits[4:6]]
        scale = 255
    elif len(digits) == 3:
        components = list(digits)
        scale = 15
    else:
        logger.debug(f"Hex color '#{digits}' has unsupported length, using default")
        return DEFAULT_COLOR
    
    channels = []
    for component in components:
        try:
            channels.append(int(component, 16) / scale)
        except ValueError:
            logger.debug(f"Invalid hex digits '{component}' in color '#{digits}'")
            channels.append(0.0)
    
    return Color(channels[0], channels[1], channels[2], 1.0)


def _parse_rgb_function(arguments) -> Optional[Color]:
    values = [token for token in _significant(arguments)
              if not (token.type == 'literal' and token.value in (',', '/'))]
    if len(values) not in (3, 4):
        return None
    
    channels = []
    for token in values[:3]:
        if token.type == 'number':
            channels.append(_clamp(token.value / 255))
        elif token.type == 'percentage':
            channels.append(_clamp(token.value / 100))
        else:
            return None
    
    alpha = 1.0
    if len(values) == 4:
        token = values[3]
        if token.type == 'number':
            alpha = _clamp(token.value)
        elif token.type == 'percentage':
            alpha = _clamp(token.value / 100)
        else:
            return None
    
    return Color(channels[0], channels[1], channels[2], alpha)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, float(value)))
