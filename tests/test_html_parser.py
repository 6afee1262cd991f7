from render_engine.dom import Comment, Element, Text
from render_engine.parser import HTMLParser


def _body(root):
    return [child for child in root.element_children if child.tag_name == 'body'][0]


def test_parse_builds_element_tree():
    root = HTMLParser().parse("<div id='main' class='a b'><p>Hi</p><!-- note --></div>")
    
    assert root.tag_name == 'html'
    assert [child.tag_name for child in root.element_children] == ['head', 'body']
    
    div = _body(root).element_children[0]
    assert div.id == 'main'
    assert div.class_list == {'a', 'b'}
    assert div.get_attribute('class') == 'a b'
    
    paragraph, comment = div.children
    assert isinstance(paragraph, Element) and paragraph.tag_name == 'p'
    assert isinstance(paragraph.children[0], Text)
    assert paragraph.children[0].data == 'Hi'
    assert isinstance(comment, Comment)
    assert comment.data == ' note '


def test_parse_drops_doctype_and_whitespace_text():
    root = HTMLParser().parse("<!DOCTYPE html>\n<html>\n<body>\n  <p></p>\n</body>\n</html>")
    
    assert root.tag_name == 'html'
    body = _body(root)
    assert all(not isinstance(child, Text) for child in body.children)
    assert body.element_children[0].tag_name == 'p'


def test_parse_accepts_bytes():
    root = HTMLParser().parse(b"<p>caf\xc3\xa9</p>")
    paragraph = _body(root).element_children[0]
    assert paragraph.children[0].data == 'café'


def test_extract_stylesheets_in_document_order():
    parser = HTMLParser()
    root = parser.parse(
        "<html><head><style>p { color: red }</style></head>"
        "<body><style>div {}</style></body></html>"
    )
    assert parser.extract_stylesheets(root) == "p { color: red }\ndiv {}"


def test_extract_stylesheets_without_style_elements():
    parser = HTMLParser()
    assert parser.extract_stylesheets(parser.parse("<p>x</p>")) == ""
