"""
RenderEngine - Main engine class for the styling and layout pipeline.

This class integrates the document and stylesheet loaders, style resolution,
layout and display list construction.
"""

import logging
from typing import Optional

from ..css.stylesheet import Stylesheet
from ..dom import Element
from ..layout import Dimensions, LayoutBox, UnsupportedUnitError, layout_tree
from ..parser import CSSParser, HTMLParser
from ..rendering import DisplayList, build_display_list
from ..style import StyledNode, style_tree
from ..utils.config import Config
from ..utils.logging import PerformanceLogger, log_exception

logger = logging.getLogger(__name__)


class RenderEngine:
    """
    Main rendering pipeline.
    
    A pipeline run is atomic: it either returns a complete display list or
    raises. The styled tree is cached until the document or stylesheets
    change; the layout tree is rebuilt on every pass.
    """
    
    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the render engine.
        
        Args:
            config: Configuration; defaults are used when omitted
        """
        self.config = config or Config()
        
        self.html_parser = HTMLParser()
        self.css_parser = CSSParser()
        self.performance = PerformanceLogger(logger, "RenderEngine")
        
        self.document: Optional[Element] = None
        self.author_stylesheet = Stylesheet()
        self.document_stylesheet = Stylesheet()
        self._styled_root: Optional[StyledNode] = None
        
        logger.debug("RenderEngine initialized with viewport %sx%s",
                     self.config.get('viewport.width'), self.config.get('viewport.height'))
    
    def load_html(self, html_content: str) -> Element:
        """
        Parse and load an HTML document.
        
        Args:
            html_content: HTML content as string
        
        Returns:
            The root element of the parsed document
        """
        with self.performance.stage("parse_html"):
            root = self.html_parser.parse(html_content)
        
        self.load_document(root)
        
        if self.config.get('css.use_document_styles', True):
            style_text = self.html_parser.extract_stylesheets(root)
            if style_text.strip():
                self.document_stylesheet = self.css_parser.parse(style_text)
                logger.debug(f"Loaded {len(self.document_stylesheet)} rules from <style> elements")
        
        return root
    
    def load_document(self, root: Element) -> None:
        """Load an already built document tree."""
        self.document = root
        self.document_stylesheet = Stylesheet()
        self._styled_root = None
    
    def load_css(self, css_content: str) -> Stylesheet:
        """
        Parse a stylesheet and append its rules to the author stylesheet.
        
        Args:
            css_content: CSS content as string
        
        Returns:
            The parsed stylesheet
        """
        with self.performance.stage("parse_css"):
            stylesheet = self.css_parser.parse(css_content)
        
        self.load_stylesheet(stylesheet)
        return stylesheet
    
    def load_stylesheet(self, stylesheet: Stylesheet) -> None:
        """Append an already built stylesheet to the author stylesheet."""
        self.author_stylesheet = self.author_stylesheet.extend(stylesheet)
        self._styled_root = None
    
    @property
    def stylesheet(self) -> Stylesheet:
        """The effective stylesheet: author rules followed by document rules."""
        return self.author_stylesheet.extend(self.document_stylesheet)
    
    def style(self) -> StyledNode:
        """
        Resolve styles for the loaded document.
        
        Returns:
            The styled tree
        """
        if self.document is None:
            raise ValueError("No document loaded")
        
        if self._styled_root is None:
            with self.performance.stage("style"):
                self._styled_root = style_tree(self.document, self.stylesheet)
        
        return self._styled_root
    
    def viewport(self, width: Optional[float] = None, height: Optional[float] = None) -> Dimensions:
        """Initial containing block, taking unset sizes from the configuration."""
        default_width, default_height = self.config.viewport_size()
        if width is None:
            width = default_width
        if height is None:
            height = default_height
        return Dimensions.viewport(width, height)
    
    def layout(self, width: Optional[float] = None, height: Optional[float] = None) -> Optional[LayoutBox]:
        """
        Lay out the loaded document.
        
        Args:
            width: Viewport width override
            height: Viewport height override
        
        Returns:
            The root layout box, or None if the root element is not displayed
        
        Raises:
            UnsupportedUnitError: if a length uses a unit layout cannot measure
        """
        styled_root = self.style()
        
        try:
            with self.performance.stage("layout"):
                root_box = layout_tree(styled_root, self.viewport(width, height))
        except UnsupportedUnitError as e:
            log_exception(logger, e, "Layout aborted")
            raise
        
        return root_box
    
    def render(self, width: Optional[float] = None, height: Optional[float] = None) -> DisplayList:
        """
        Run the full pipeline and return the display list.
        
        Args:
            width: Viewport width override
            height: Viewport height override
        
        Returns:
            Paint commands in painting order
        """
        root_box = self.layout(width, height)
        
        with self.performance.stage("paint"):
            display_list = build_display_list(root_box)
        
        logger.info(f"Rendered {len(display_list)} paint commands")
        return display_list


def render_document(html_content: str, css_content: str = "",
                    width: Optional[float] = None, height: Optional[float] = None,
                    config: Optional[Config] = None) -> DisplayList:
    """
    Render a document in one call.
    
    Args:
        html_content: HTML content
        css_content: Author stylesheet
        width: Viewport width
        height: Viewport height
        config: Optional configuration
    
    Returns:
        The display list
    """
    engine = RenderEngine(config)
    engine.load_html(html_content)
    if css_content:
        engine.load_css(css_content)
    return engine.render(width, height)
