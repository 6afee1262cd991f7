import json

import pytest

from render_engine.main import main, parse_args

HTML = '<html><body><div id="box"></div></body></html>'
CSS = "html, body, div { display: block } #box { height: 20px; background-color: #00ff00 }"


@pytest.fixture
def documents(tmp_path):
    html_file = tmp_path / "page.html"
    html_file.write_text(HTML)
    css_file = tmp_path / "page.css"
    css_file.write_text(CSS)
    return str(html_file), str(css_file)


def test_parse_args_defaults():
    args = parse_args(["page.html"])
    assert args.html_file == "page.html"
    assert args.css == []
    assert args.width is None
    assert args.dump is None
    assert args.debug is False


def test_prints_display_list_as_json(documents, capsys):
    html_file, css_file = documents
    
    assert main([html_file, "--css", css_file, "--width", "400"]) == 0
    
    commands = json.loads(capsys.readouterr().out)
    assert commands == [{
        "type": "solid-rectangle",
        "color": {"r": 0.0, "g": 1.0, "b": 0.0, "a": 1.0},
        "rect": {"x": 0.0, "y": 0.0, "width": 400.0, "height": 20.0},
    }]


def test_dump_dom(documents, capsys):
    html_file, _ = documents
    
    assert main([html_file, "--dump", "dom"]) == 0
    
    out = capsys.readouterr().out
    assert '<div id="box">' in out
    assert out.splitlines()[0] == '<html>'


def test_dump_layout(documents, capsys):
    html_file, css_file = documents
    assert main([html_file, "--css", css_file, "--dump", "layout"]) == 0
    assert "block" in capsys.readouterr().out


def test_missing_input_file_fails(tmp_path):
    assert main([str(tmp_path / "missing.html")]) == 1


def test_unsupported_unit_fails(documents, tmp_path):
    html_file, _ = documents
    css_file = tmp_path / "em.css"
    css_file.write_text("div { display: block; width: 2em }")
    assert main([html_file, "--css", str(css_file)]) == 1


def test_config_file_sets_viewport(documents, tmp_path, capsys):
    html_file, css_file = documents
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"viewport": {"width": 250}}))
    
    assert main([html_file, "--css", css_file, "--config", str(config_file)]) == 0
    
    commands = json.loads(capsys.readouterr().out)
    assert commands[0]["rect"]["width"] == 250.0
