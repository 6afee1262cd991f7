from render_engine.dom import Comment, Element, NodeType, Text, dump_tree


def test_element_normalizes_tag_and_attribute_names():
    element = Element('DIV', {'ID': 'main', 'Class': 'a b'})
    assert element.tag_name == 'div'
    assert element.get_attribute('id') == 'main'
    assert element.node_type == NodeType.ELEMENT_NODE


def test_element_id_is_none_without_attribute():
    assert Element('p').id is None
    assert Element('p', {'id': 'x'}).id == 'x'


def test_class_list_splits_on_whitespace():
    element = Element('p', {'class': '  note   wide\tbig '})
    assert element.class_list == {'note', 'wide', 'big'}
    assert Element('p').class_list == set()


def test_element_children_skips_text_and_comments():
    child = Element('span')
    element = Element('p', children=[Text('hello'), child, Comment('c')])
    assert element.element_children == [child]
    assert len(element.children) == 3


def test_text_and_comment_are_leaves():
    assert Text('x').children == []
    assert Text(None).data == ''
    assert Comment('note').node_type == NodeType.COMMENT_NODE


def test_dump_tree():
    tree = Element('div', {'id': 'a'}, [Text('hi'), Comment('c')])
    assert dump_tree(tree).splitlines() == [
        '<div id="a">',
        '  hi',
        '  <!--c-->',
        '</div>',
    ]
