from __future__ import annotations

import io
import unittest
from types import SimpleNamespace

from streamhtml import HtmlBuilder, RenderConfig, render, to_html


def element(name, attrs=None, *children):
    return SimpleNamespace(name=name, attrs=attrs or {}, children=list(children))


def text(data):
    return SimpleNamespace(name="#text", data=data, attrs=None, children=None)


class TestToHtml(unittest.TestCase):
    def test_compact_element_with_escaped_attribute(self) -> None:
        node = element("div", {"id": "<>&\"'"})
        assert to_html(node) == '<div id="&lt;&gt;&amp;&quot;&#x27;"></div>'

    def test_void_elements_use_empty_tags(self) -> None:
        node = element("p", None, text("a"), element("br"), text("b"))
        assert to_html(node) == "<p>a<br>b</p>"
        assert to_html(node, close_empty_tags=True) == "<p>a<br/>b</p>"

    def test_none_attribute_values_become_flags(self) -> None:
        node = element("input", {"type": "checkbox", "checked": None})
        assert to_html(node) == '<input type="checkbox" checked>'

    def test_non_string_attribute_values(self) -> None:
        node = element("td", {"colspan": 2})
        assert to_html(node) == '<td colspan="2"></td>'

    def test_indented_tree(self) -> None:
        node = element(
            "div",
            {"class": "box"},
            element("h1", None, text("Title")),
            element("pre", None, text("keep\n  this")),
        )
        assert to_html(node, indent="  ") == (
            '<div class="box">\n'
            "  <h1>\n"
            "    Title\n"
            "  </h1>\n"
            "  <pre>keep\n"
            "  this  </pre>\n"
            "</div>\n"
        )

    def test_document_renders_children_only(self) -> None:
        doc = SimpleNamespace(
            name="#document",
            children=[
                SimpleNamespace(name="!doctype", data=None),
                element("html", None, element("body")),
            ],
        )
        assert to_html(doc) == "<!DOCTYPE html><html><body></body></html>"

    def test_missing_children_are_skipped(self) -> None:
        fragment = SimpleNamespace(name="#document-fragment", children=[None, element("p"), None])
        assert to_html(fragment) == "<p></p>"
        assert to_html(element("div", None, None, text("x"))) == "<div>x</div>"

    def test_comments_and_raw_nodes(self) -> None:
        node = element(
            "div",
            None,
            SimpleNamespace(name="#comment", data=" note "),
            SimpleNamespace(name="#raw", data="<b>ok</b>"),
        )
        assert to_html(node) == "<div><!-- note --><b>ok</b></div>"

    def test_template_content(self) -> None:
        content = SimpleNamespace(name="#document-fragment", children=[element("p")])
        node = SimpleNamespace(name="template", attrs={}, children=[], template_content=content)
        assert to_html(node) == "<template><p></p></template>"

    def test_null_text_node(self) -> None:
        assert to_html(element("p", None, text(None))) == "<p>null</p>"

    def test_custom_escaper(self) -> None:
        node = element("p", {"title": "x"}, text("y"))
        assert to_html(node, escaper=str.upper) == '<p title="X">Y</p>'


class TestRender(unittest.TestCase):
    def test_render_returns_sink(self) -> None:
        out = io.StringIO()
        builder = HtmlBuilder(out, RenderConfig(indent="\t"))
        assert render(element("div"), builder) is out
        assert out.getvalue() == "<div>\n</div>\n"

    def test_render_matches_manual_calls(self) -> None:
        node = element("ul", None, element("li", {"class": "x"}, text("1")))
        builder = HtmlBuilder.in_memory()
        render(node, builder)

        manual = HtmlBuilder.in_memory()
        manual.open_tag("ul").finalize_tag()
        manual.open_tag("li").add_attribute("class", "x").finalize_tag()
        manual.write_escaped_text("1").close_tag("li").close_tag("ul")
        assert builder.getvalue() == manual.getvalue()
