import pytest

from tsukushi.node import comment, element, text
from tsukushi.parser import MAX_NESTING_DEPTH, parse_document
from tsukushi.renderer import Renderer, RenderMode, print_tree, render_tree, to_html


@pytest.mark.ci
def test_render_tree():
    root = parse_document('<div id="main"><p>Hi</p></div>')
    assert render_tree(root) == "\n".join([
        '<div id="main">',
        "  <p>",
        "    Hi",
        "  </p>",
        "</div>",
    ])


@pytest.mark.ci
def test_render_tree_with_comment_and_indent():
    root = element("body", {}, [
        element("div", {}, [text("Some text"), comment("A comment")]),
    ])
    assert render_tree(root, indent=4) == "\n".join([
        "<body>",
        "    <div>",
        "        Some text",
        "        <!-- A comment -->",
        "    </div>",
        "</body>",
    ])


@pytest.mark.ci
def test_render_tree_rejects_unknown_nodes():
    with pytest.raises(TypeError):
        render_tree(object())


@pytest.mark.ci
def test_print_tree(capsys):
    print_tree(element("p", {}, [text("Hi")]))
    assert capsys.readouterr().out == "<p>\n  Hi\n</p>\n"


@pytest.mark.ci
def test_to_html():
    root = element("a", {"href": "/", "title": 'say "hi"'}, [
        text("Link"),
        comment(" c "),
    ])
    assert to_html(root) == "<a href=\"/\" title='say \"hi\"'>Link<!-- c --></a>"


ROUND_TRIP_TREES = [
    element("div"),
    text("just text"),
    comment(" only a comment "),
    element("html", {}, [comment(" c "), element("p", {}, [text("x")])]),
    element("a", {"title": 'say "hi"', "alt": "it's"}, [text("Link")]),
    element("p", {"lang": "ja"}, [text("こんにちは 🌸")]),
    element("div", {"id": "main", "class": "foo bar"}, [
        element("h1", {}, [text("Title")]),
        comment(" separator "),
        element("p", {"data": "こんにちは"}, [
            text("Hello "),
            element("b", {}, [text("world")]),
        ]),
        element("ul", {}, [
            element("li", {"title": 'say "hi"'}, []),
        ]),
    ]),
]


@pytest.mark.ci
@pytest.mark.parametrize("root", ROUND_TRIP_TREES)
def test_to_html_reparses_to_equal_tree(root):
    assert parse_document(to_html(root)) == root


@pytest.mark.ci
def test_to_html_deeply_nested_tree():
    root = element("a", {}, [text("x")])
    for _ in range(MAX_NESTING_DEPTH - 1):
        root = element("a", {}, [root])
    markup = to_html(root)
    assert markup == "<a>" * MAX_NESTING_DEPTH + "x" + "</a>" * MAX_NESTING_DEPTH
    assert to_html(parse_document(markup)) == markup


@pytest.mark.ci
def test_to_html_rejects_unquotable_attribute_value():
    root = element("a", {"title": 'it\'s "quoted"'})
    with pytest.raises(ValueError):
        to_html(root)


@pytest.mark.ci
def test_renderer_modes():
    root = parse_document("<p>Hi</p>")
    assert Renderer(node=root).render() == "<p>\n  Hi\n</p>"
    assert Renderer(node=root, render_mode=RenderMode.MARKUP).render() == "<p>Hi</p>"


@pytest.mark.ci
def test_renderer_unsupported_mode():
    renderer = Renderer(node=text("x"), render_mode="bogus")
    with pytest.raises(ValueError):
        renderer.render()
