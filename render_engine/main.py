#!/usr/bin/env python3
"""
Render Engine - Main Entry Point

Renders an HTML file with optional stylesheets and prints the paint list as JSON.
"""

import argparse
import json
import sys
from typing import List, Optional

from render_engine import __version__
from render_engine.core import RenderEngine
from render_engine.dom import dump_tree
from render_engine.layout import UnsupportedUnitError, dump_layout_tree
from render_engine.style import dump_style_tree
from render_engine.utils.config import Config
from render_engine.utils.logging import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Render Engine - style, lay out and paint an HTML document")
    
    parser.add_argument("html_file", help="HTML document to render")
    parser.add_argument("--css", action="append", default=[], metavar="FILE",
                        help="Author stylesheet (may be given several times)")
    parser.add_argument("--width", type=float, default=None, help="Viewport width in pixels")
    parser.add_argument("--height", type=float, default=None, help="Viewport height in pixels")
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")
    parser.add_argument("--dump", choices=("dom", "style", "layout"), default=None,
                        help="Print a debug tree instead of the paint list")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"Render Engine {__version__}")
    
    return parser.parse_args(argv)


def _read_file(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = parse_args(argv)
    config = Config(args.config)
    
    logger = setup_logging(
        log_file=config.get('logging.file'),
        console_level="DEBUG" if args.debug else config.get('logging.console_level', "INFO"),
        file_level=config.get('logging.file_level', "DEBUG"),
    )
    
    try:
        html_content = _read_file(args.html_file)
        css_contents = [_read_file(path) for path in args.css]
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1
    
    engine = RenderEngine(config)
    engine.load_html(html_content)
    for css_content in css_contents:
        engine.load_css(css_content)
    
    try:
        if args.dump == "dom":
            print(dump_tree(engine.document))
        elif args.dump == "style":
            print(dump_style_tree(engine.style()))
        elif args.dump == "layout":
            root_box = engine.layout(args.width, args.height)
            print(dump_layout_tree(root_box) if root_box is not None else "")
        else:
            display_list = engine.render(args.width, args.height)
            print(json.dumps([command.to_dict() for command in display_list], indent=2))
    except UnsupportedUnitError as e:
        logger.error(f"Rendering failed: {e}")
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
