"""
Stylesheet model: an ordered list of rules, each pairing selectors with declarations.
"""

from typing import Iterable, List, Optional

from .selector import Selector
from .values import Value


class Declaration:
    """A single property: value pair. Property names are lower-case."""
    
    def __init__(self, property: str, value: Value):
        self.property = property.lower()
        self.value = value
    
    def __eq__(self, other):
        if not isinstance(other, Declaration):
            return NotImplemented
        return self.property == other.property and self.value == other.value
    
    def __repr__(self):
        return f"{self.property}: {self.value!r}"


class Rule:
    """
    A style rule.
    
    Rules are applied at most once per element, on the first matching selector.
    """
    
    def __init__(self, selectors: Optional[Iterable[Selector]] = None,
                 declarations: Optional[Iterable[Declaration]] = None):
        self.selectors: List[Selector] = list(selectors or [])
        self.declarations: List[Declaration] = list(declarations or [])
    
    def __repr__(self):
        selector_text = ", ".join(str(s.text or s.simple) for s in self.selectors)
        body = "; ".join(repr(d) for d in self.declarations)
        return f"{selector_text} {{ {body} }}"


class Stylesheet:
    """An ordered list of rules; later rules override earlier ones."""
    
    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self.rules: List[Rule] = list(rules or [])
    
    def extend(self, other: 'Stylesheet') -> 'Stylesheet':
        """Return a new stylesheet with other's rules appended after ours."""
        return Stylesheet(self.rules + other.rules)
    
    def __len__(self):
        return len(self.rules)
    
    def __repr__(self):
        return "\n".join(repr(rule) for rule in self.rules)
