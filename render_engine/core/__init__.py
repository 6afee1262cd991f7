"""
Core implementation for the render engine.
This module contains the main RenderEngine class.
"""

from .engine import RenderEngine, render_document

__all__ = ['RenderEngine', 'render_document']
