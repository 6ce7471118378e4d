from html.parser import HTMLParser

import pytest

from kumihan.config import ParserConfig, RendererConfig
from kumihan.constants import SELF_CLOSING_TAGS
from kumihan.converter import convert, parse
from kumihan.errors import KumihanConfigError, MarkupSyntaxError
from kumihan.node import Element, Node


PAGE = """doctype html
html(lang="en")
  head
    meta(charset="utf-8")
    title Sample page
  body
    #header
      h1.title Welcome
    #container
      / main navigation
      ul.menu
        li.item text1
        li.item: a(href="#" alt="link"): img(src="logo.png")
      .wrapper
      p
        | first line
        | second line
"""


class StructureCollector(HTMLParser):
    """Collects (depth, tag) pairs from rendered HTML."""

    def __init__(self):
        super().__init__()
        self.depth = 0
        self.tags: list[tuple[int, str]] = []

    def handle_starttag(self, tag, attrs):
        self.tags.append((self.depth, tag))
        if tag not in SELF_CLOSING_TAGS:
            self.depth += 1

    def handle_endtag(self, tag):
        self.depth -= 1


def collect_structure(nodes: list[Node], depth: int = 0) -> list[tuple[int, str]]:
    tags: list[tuple[int, str]] = []
    for node in nodes:
        if isinstance(node, Element):
            tags.append((depth, node.tag))
            tags.extend(collect_structure(node.children, depth + 1))
    return tags


@pytest.mark.ci
def test_convert_sample_page():
    html = convert(PAGE)
    assert html == (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "  <head>\n"
        '    <meta charset="utf-8">\n'
        "    <title>\n"
        "      Sample page\n"
        "    </title>\n"
        "  </head>\n"
        "  <body>\n"
        '    <div id="header">\n'
        '      <h1 class="title">\n'
        "        Welcome\n"
        "      </h1>\n"
        "    </div>\n"
        '    <div id="container">\n'
        "      <!-- main navigation -->\n"
        '      <ul class="menu">\n'
        '        <li class="item">\n'
        "          text1\n"
        "        </li>\n"
        '        <li class="item">\n'
        '          <a href="#" alt="link">\n'
        '            <img src="logo.png">\n'
        "          </a>\n"
        "        </li>\n"
        "      </ul>\n"
        '      <div class="wrapper"></div>\n'
        "      <p>\n"
        "        first line\n"
        "        second line\n"
        "      </p>\n"
        "    </div>\n"
        "  </body>\n"
        "</html>\n"
    )


@pytest.mark.ci
def test_rendered_html_keeps_tree_structure():
    collector = StructureCollector()
    collector.feed(convert(PAGE))
    collector.close()
    assert collector.tags == collect_structure(parse(PAGE))
    assert collector.depth == 0


@pytest.mark.ci
def test_item_text_is_one_level_deeper_than_its_tag():
    html = convert("ul\n  li.item text1")
    lines = html.splitlines()
    assert lines[1] == '  <li class="item">'
    assert lines[2] == "    text1"


@pytest.mark.ci
def test_doctype_renders_first_without_wrapper():
    lines = convert("doctype html\nhtml\n  body").splitlines()
    assert lines[0] == "<!DOCTYPE html>"
    assert lines[1] == "<html>"


@pytest.mark.ci
def test_attribute_order_is_preserved():
    html = convert('a(href="#" alt="link") Home')
    assert html.splitlines()[0] == '<a href="#" alt="link">'


@pytest.mark.ci
def test_convert_with_custom_indentation():
    source = "div\n    p\n        span hi"
    html = convert(
        source,
        parser_config=ParserConfig(indent_width=4),
        renderer_config=RendererConfig(indent=" "),
    )
    assert html == "<div>\n <p>\n  <span>\n   hi\n  </span>\n </p>\n</div>\n"


@pytest.mark.ci
def test_convert_is_independent_between_runs():
    assert convert("p one") == convert("p one")
    assert convert("p two") == "<p>\n  two\n</p>\n"


@pytest.mark.ci
def test_convert_aborts_on_first_error():
    with pytest.raises(MarkupSyntaxError) as excinfo:
        convert("div\n  p ok\n  123 bad\n  (also bad)")
    assert excinfo.value.line_number == 3


@pytest.mark.ci
def test_invalid_config():
    with pytest.raises(KumihanConfigError):
        ParserConfig(indent_width=0)
    with pytest.raises(KumihanConfigError):
        ParserConfig(max_inline_depth=-1)


@pytest.mark.ci
def test_convert_deeply_indented_source():
    source = "\n".join("  " * level + "div" for level in range(1200))
    lines = convert(source).splitlines()
    assert len(lines) == 2 * 1200 - 1
    assert lines[1199] == "  " * 1199 + "<div></div>"
    assert lines[-1] == "</div>"
