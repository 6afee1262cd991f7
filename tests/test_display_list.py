from render_engine.css import Color, Keyword
from render_engine.layout import Rectangle
from render_engine.rendering import SolidRectangle, build_display_list

from .conftest import div

BLOCK = "div { display: block } "


def test_background_fills_the_border_box(lay_out):
    root = lay_out(div(), BLOCK + "div { height: 40px; padding: 5px; margin: 10px; background-color: red }")
    assert build_display_list(root) == [
        SolidRectangle(Color.RED, Rectangle(0, 10, 940, 50)),
    ]


def test_borders_are_painted_at_the_border_box_edges(lay_out):
    root = lay_out(div(), BLOCK + "div { height: 50px; border-width: 2px; border-color: black }")
    assert build_display_list(root) == [
        SolidRectangle(Color.BLACK, Rectangle(0, 0, 2, 54)),
        SolidRectangle(Color.BLACK, Rectangle(958, 0, 2, 54)),
        SolidRectangle(Color.BLACK, Rectangle(0, 0, 960, 2)),
        SolidRectangle(Color.BLACK, Rectangle(0, 52, 960, 2)),
    ]


def test_background_is_painted_before_borders(lay_out):
    root = lay_out(div(), BLOCK + "div { height: 50px; border-width: 2px; border-color: black; background-color: #0000ff }")
    commands = build_display_list(root)
    assert len(commands) == 5
    assert commands[0] == SolidRectangle(Color.BLUE, Rectangle(0, 0, 960, 54))
    assert all(command.color == Color.BLACK for command in commands[1:])


def test_boxes_without_colors_paint_nothing(lay_out):
    root = lay_out(div(None, div(), div()), BLOCK + "div { height: 10px; border-width: 1px }")
    assert build_display_list(root) == []


def test_commands_follow_tree_pre_order(lay_out):
    tree = div({'id': 'a'}, div({'id': 'b'}, div({'id': 'c'})), div({'id': 'd'}))
    root = lay_out(tree, BLOCK + """
        div { height: 10px }
        #a { background-color: red }
        #b { background-color: green }
        #c { background-color: blue }
        #d { background-color: yellow }
    """)
    assert [command.color for command in build_display_list(root)] == [
        Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW,
    ]


def test_non_color_values_are_ignored(lay_out):
    root = lay_out(div(), BLOCK + "div { height: 10px }")
    root.styled_node.specified_values['background-color'] = Keyword('inherit')
    assert build_display_list(root) == []


def test_empty_document_has_no_commands():
    assert build_display_list(None) == []


def test_solid_rectangle_to_dict():
    command = SolidRectangle(Color(1, 0, 0, 0.5), Rectangle(1, 2, 3, 4))
    assert command.to_dict() == {
        "type": "solid-rectangle",
        "color": {"r": 1.0, "g": 0.0, "b": 0.0, "a": 0.5},
        "rect": {"x": 1, "y": 2, "width": 3, "height": 4},
    }
