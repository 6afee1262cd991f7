"""
Paint list construction for the render engine.
"""

from .display_list import DisplayCommand, DisplayList, DisplayListBuilder, SolidRectangle, build_display_list

__all__ = ['DisplayCommand', 'DisplayList', 'DisplayListBuilder', 'SolidRectangle', 'build_display_list']
