"""
CSS value model.
Declaration values are classified by the stylesheet loader into one of
Color, Length or Keyword.
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Union


class Unit(Enum):
    """CSS length units. Only PX and PCT are given a meaning by layout."""
    PX = "px"
    PCT = "%"
    EM = "em"      # font size of the element
    EX = "ex"      # x-height of the font
    CH = "ch"      # width of the "0" glyph
    REM = "rem"    # font size of the root element
    VH = "vh"      # 1/100th of viewport height
    VW = "vw"      # 1/100th of viewport width
    VMIN = "vmin"
    VMAX = "vmax"
    MM = "mm"
    Q = "q"        # quarter millimeter
    CM = "cm"
    IN = "in"
    PT = "pt"      # 1/72nd inch
    PC = "pc"      # pica, 12 points
    
    @classmethod
    def from_string(cls, unit: str) -> Optional['Unit']:
        """
        Look up a unit by its CSS spelling.
        
        Args:
            unit: Unit text such as "px" or "%", any case
        
        Returns:
            The unit, or None if it is not a known unit
        """
        try:
            return cls(unit.lower())
        except ValueError:
            return None


class Color:
    """RGBA color with channels in the 0-1 range."""
    
    def __init__(self, r: float, g: float, b: float, a: float = 1.0):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)
        self.a = float(a)
    
    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)
    
    def to_dict(self) -> Dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}
    
    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()
    
    def __hash__(self):
        return hash(self.to_tuple())
    
    def __repr__(self):
        return f"Color(r={self.r:g}, g={self.g:g}, b={self.b:g}, a={self.a:g})"


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.ORANGE = Color(1.0, 165 / 255, 0.0, 1.0)
Color.ORANGERED = Color(1.0, 69 / 255, 0.0, 1.0)
Color.BRONZE = Color(194 / 255, 107 / 255, 19 / 255, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0, 1.0)
Color.PURPLE = Color(128 / 255, 0.0, 128 / 255, 1.0)
Color.GRAY = Color(128 / 255, 128 / 255, 128 / 255, 1.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)

# Colors for unrecognized keywords and malformed hex lengths
DEFAULT_COLOR = Color.WHITE

NAMED_COLORS: Dict[str, Color] = {
    'black': Color.BLACK,
    'white': Color.WHITE,
    'red': Color.RED,
    'green': Color.GREEN,
    'blue': Color.BLUE,
    'orange': Color.ORANGE,
    'orangered': Color.ORANGERED,
    'bronze': Color.BRONZE,
    'yellow': Color.YELLOW,
    'purple': Color.PURPLE,
    'gray': Color.GRAY,
    'grey': Color.GRAY,
    'transparent': Color.TRANSPARENT,
}


class Length:
    """A number with a length unit."""
    
    def __init__(self, value: float, unit: Unit = Unit.PX):
        self.value = float(value)
        self.unit = unit
    
    def __eq__(self, other):
        if not isinstance(other, Length):
            return NotImplemented
        return self.value == other.value and self.unit == other.unit
    
    def __hash__(self):
        return hash((self.value, self.unit))
    
    def __repr__(self):
        return f"Length({self.value:g}{self.unit.value})"


class Keyword:
    """Any value that is neither a color nor a length, e.g. "block" or "auto"."""
    
    def __init__(self, text: str):
        self.text = text
    
    def __eq__(self, other):
        if not isinstance(other, Keyword):
            return NotImplemented
        return self.text == other.text
    
    def __hash__(self):
        return hash(self.text)
    
    def __repr__(self):
        return f"Keyword({self.text!r})"


Value = Union[Color, Length, Keyword]
