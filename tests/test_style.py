from render_engine.css import Keyword, Length, Unit
from render_engine.dom import Comment, Element, Text
from render_engine.style import Display, StyledNode, specified_values, style_tree


def test_selector_must_match_tag_id_and_classes(css_parser):
    stylesheet = css_parser.parse("p#x.a.b { width: 10px }")
    
    assert specified_values(Element('p', {'id': 'x', 'class': 'a b c'}), stylesheet) == {
        'width': Length(10, Unit.PX),
    }
    assert specified_values(Element('p', {'id': 'x', 'class': 'a'}), stylesheet) == {}
    assert specified_values(Element('div', {'id': 'x', 'class': 'a b'}), stylesheet) == {}
    assert specified_values(Element('p', {'id': 'y', 'class': 'a b'}), stylesheet) == {}


def test_later_rule_wins_regardless_of_specificity(css_parser):
    stylesheet = css_parser.parse("#main { width: 10px } div { width: 20px }")
    values = specified_values(Element('div', {'id': 'main'}), stylesheet)
    assert values['width'] == Length(20, Unit.PX)


def test_rule_applies_once_on_first_matching_selector(css_parser):
    stylesheet = css_parser.parse("div { height: 1px } div, .a { width: 5px } p { width: 9px }")
    values = specified_values(Element('div', {'class': 'a'}), stylesheet)
    assert values == {'height': Length(1, Unit.PX), 'width': Length(5, Unit.PX)}


def test_only_trailing_compound_is_matched(css_parser):
    stylesheet = css_parser.parse("section > p { width: 3px }")
    assert specified_values(Element('p'), stylesheet) == {'width': Length(3, Unit.PX)}


def test_unsupported_selectors_never_match(css_parser):
    stylesheet = css_parser.parse("p:hover { width: 3px } p[title] { width: 4px }")
    assert specified_values(Element('p', {'title': 't'}), stylesheet) == {}


def test_universal_selector_matches_everything(css_parser):
    stylesheet = css_parser.parse("* { display: block }")
    assert specified_values(Element('span'), stylesheet) == {'display': Keyword('block')}


def test_style_tree_keeps_only_elements(css_parser):
    stylesheet = css_parser.parse("span { display: block }")
    span = Element('span')
    root = Element('div', children=[Text('hello'), span, Comment('ignored')])
    
    styled = style_tree(root, stylesheet)
    
    assert styled.node is root
    assert styled.specified_values == {}
    assert len(styled.children) == 1
    assert styled.children[0].node is span
    assert styled.children[0].display() == Display.BLOCK


def test_values_are_shared_with_the_stylesheet(css_parser):
    stylesheet = css_parser.parse("p { width: 10px }")
    styled = style_tree(Element('div', children=[Element('p'), Element('p')]), stylesheet)
    
    shared = stylesheet.rules[0].declarations[0].value
    assert all(child.value('width') is shared for child in styled.children)


class TestStyledNodeAccessors:

    def test_value_returns_none_when_unset(self):
        node = StyledNode(Element('p'), {'width': Length(5, Unit.PX)})
        assert node.value('width') == Length(5, Unit.PX)
        assert node.value('height') is None
    
    def test_display_defaults_to_inline(self):
        assert StyledNode(Element('p')).display() == Display.INLINE
        assert StyledNode(Element('p'), {'display': Keyword('flex')}).display() == Display.INLINE
        assert StyledNode(Element('p'), {'display': Length(1)}).display() == Display.INLINE
    
    def test_display_keywords(self):
        for text, display in [('block', Display.BLOCK), ('inline-block', Display.INLINE_BLOCK),
                              ('none', Display.NONE), ('inline', Display.INLINE)]:
            assert StyledNode(Element('p'), {'display': Keyword(text)}).display() == display
    
    def test_num_or_ignores_unit(self):
        node = StyledNode(Element('p'), {
            'width': Length(3, Unit.EM),
            'height': Keyword('auto'),
        })
        assert node.num_or('width', 0.0) == 3.0
        assert node.num_or('height', 7.0) == 7.0
        assert node.num_or('margin-left', 1.5) == 1.5
