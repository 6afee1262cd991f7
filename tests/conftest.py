import logging

import pytest

from render_engine.dom import Element
from render_engine.layout import Dimensions, layout_tree
from render_engine.parser import CSSParser
from render_engine.style import style_tree


@pytest.fixture(autouse=True)
def reset_engine_logger():
    """Drop handlers installed by setup_logging so streams don't leak between tests."""
    yield
    logger = logging.getLogger("render_engine")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def css_parser():
    return CSSParser()


@pytest.fixture
def lay_out():
    """Style a tree with the given CSS and lay it out in a viewport."""
    def _lay_out(root, css, width=960, height=540):
        stylesheet = CSSParser().parse(css)
        return layout_tree(style_tree(root, stylesheet), Dimensions.viewport(width, height))
    return _lay_out


def div(attributes=None, *children):
    return Element('div', attributes or {}, children)
