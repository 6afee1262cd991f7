"""
CSS Selector Engine.
This module handles parsing selector text and matching selectors against elements.
"""

import logging
from typing import List, Optional

import tinycss2

from ..dom import Element

logger = logging.getLogger(__name__)

COMBINATORS = ('>', '+', '~')


class SimpleSelector:
    """
    A compound of optional tag name, optional id and required classes.
    
    A SimpleSelector with no constraints at all is the universal selector.
    """
    
    def __init__(self, tag_name: Optional[str] = None, id: Optional[str] = None,
                 classes: Optional[List[str]] = None):
        self.tag_name = tag_name.lower() if tag_name else None
        self.id = id
        self.classes: List[str] = list(classes or [])
    
    def __eq__(self, other):
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return (self.tag_name, self.id, self.classes) == (other.tag_name, other.id, other.classes)
    
    def __str__(self):
        text = self.tag_name or ""
        if self.id:
            text += f"#{self.id}"
        text += "".join(f".{cls}" for cls in self.classes)
        return text or "*"
    
    def __repr__(self):
        return f"SimpleSelector({self})"


class Selector:
    """
    One comma-separated group of a rule's selector list.
    
    Only the trailing compound is evaluated; the combinators that preceded it
    are kept for display. A selector without a simple selector never matches.
    """
    
    def __init__(self, simple: Optional[SimpleSelector] = None,
                 combinators: Optional[List[str]] = None, text: str = ""):
        self.simple = simple
        self.combinators: List[str] = list(combinators or [])
        self.text = text
    
    def __eq__(self, other):
        if not isinstance(other, Selector):
            return NotImplemented
        return self.simple == other.simple and self.combinators == other.combinators
    
    def __repr__(self):
        return f"Selector({self.text or self.simple!s})"


class SelectorParser:
    """
    Parser for CSS selector lists.
    
    Works on tinycss2 component values, so a rule prelude from the stylesheet
    tokenizer can be handed over as is.
    """
    
    def parse(self, selector_text: str) -> List[Selector]:
        """
        Parse selector list text, e.g. "div p, .note".
        
        Args:
            selector_text: The selector text to parse
        
        Returns:
            Parsed selectors in source order; empty groups are dropped
        """
        return self.parse_tokens(tinycss2.parse_component_value_list(selector_text))
    
    def parse_tokens(self, tokens) -> List[Selector]:
        """
        Parse a selector list given as tinycss2 component values.
        
        Args:
            tokens: Component values, typically a qualified rule's prelude
        
        Returns:
            One Selector per non-empty comma group, in source order
        """
        selectors = []
        group = []
        
        for token in list(tokens) + [None]:
            if token is None or (token.type == 'literal' and token.value == ','):
                group = _strip_whitespace(group)
                if group:
                    selectors.append(self._parse_group(group))
                group = []
            elif token.type != 'comment':
                group.append(token)
        
        return selectors
    
    def _parse_group(self, group: list) -> Selector:
        text = tinycss2.serialize(group).strip()
        
        combinators = []
        compounds = []
        current = []
        pending = None
        for token in group:
            if token.type == 'whitespace':
                if current:
                    compounds.append(current)
                    current = []
                continue
            if token.type == 'literal' and token.value in COMBINATORS:
                if current:
                    compounds.append(current)
                    current = []
                pending = token.value
                continue
            if not current and compounds:
                combinators.append(pending or ' ')
                pending = None
            current.append(token)
        if current:
            compounds.append(current)
        
        if not compounds:
            logger.debug(f"Selector '{text}' has no compound selector, it will never match")
            return Selector(None, combinators, text)
        
        simple = self._parse_compound(compounds[-1])
        if simple is None:
            logger.debug(f"Selector '{text}' uses unsupported syntax, it will never match")
        
        return Selector(simple, combinators, text)
    
    def _parse_compound(self, tokens: list) -> Optional[SimpleSelector]:
        """
        Parse the tokens of a compound selector such as "div#main.note".
        
        Returns:
            The SimpleSelector, or None if the compound can never match
        """
        simple = SimpleSelector()
        position = 0
        
        while position < len(tokens):
            token = tokens[position]
            
            # Universal selector
            if position == 0 and token.type == 'literal' and token.value == '*':
                position += 1
            
            # Tag name
            elif position == 0 and token.type == 'ident':
                simple.tag_name = token.lower_value
                position += 1
            
            # Class
            elif token.type == 'literal' and token.value == '.':
                following = tokens[position + 1] if position + 1 < len(tokens) else None
                if following is None or following.type != 'ident':
                    return None
                simple.classes.append(following.value)
                position += 2
            
            # ID
            elif token.type == 'hash':
                if not token.is_identifier:
                    return None
                if simple.id is not None and simple.id != token.value:
                    return None
                simple.id = token.value
                position += 1
            
            # Pseudo-classes, attribute selectors and anything else
            else:
                return None
        
        return simple


def _strip_whitespace(tokens: list) -> list:
    start, end = 0, len(tokens)
    while start < end and tokens[start].type == 'whitespace':
        start += 1
    while end > start and tokens[end - 1].type == 'whitespace':
        end -= 1
    return tokens[start:end]


def matches_simple_selector(simple: SimpleSelector, element: Element) -> bool:
    """
    Check if a simple selector matches an element.
    
    Tag name, id and classes must all match.
    
    Args:
        simple: The simple selector
        element: The element to check
    
    Returns:
        True if the selector matches, False otherwise
    """
    if simple.tag_name is not None and simple.tag_name != element.tag_name:
        return False
    
    if simple.id is not None and element.id != simple.id:
        return False
    
    element_classes = element.class_list
    return all(cls in element_classes for cls in simple.classes)


def matches_selector(selector: Selector, element: Element) -> bool:
    """
    Check if a selector matches an element.
    
    Args:
        selector: The selector to check
        element: The element to check
    
    Returns:
        True if the element matches, False otherwise
    """
    if selector.simple is None:
        return False
    return matches_simple_selector(selector.simple, element)
