"""Drive an ``HtmlBuilder`` from a DOM-like tree.

Nodes are duck-typed: anything with ``name``, ``attrs``, ``children`` and
(for text and comments) ``data`` works, which covers the node classes of
most HTML parsers.
"""

from __future__ import annotations

from typing import Any

from .builder import HtmlBuilder
from .config import RenderConfig
from .constants import VOID_ELEMENTS
from .escape import escape_html

_CONTAINER_NODES = {"#document", "#document-fragment"}


def render(node: Any, builder: HtmlBuilder) -> Any:
    """Stream *node* and its descendants into *builder*; return the builder's sink."""
    _render_node(node, builder)
    return builder.sink()


def to_html(
    node: Any,
    *,
    indent: str | None = None,
    close_empty_tags: bool = False,
    escaper=escape_html,
) -> str:
    """Convert node to an HTML string."""
    config = RenderConfig(indent=indent, close_empty_tags=close_empty_tags, escaper=escaper)
    builder = HtmlBuilder.in_memory(config)
    _render_node(node, builder)
    return builder.getvalue()


def _children(node: Any) -> list[Any]:
    # HTML templates keep their contents in `template_content`.
    template_content = getattr(node, "template_content", None)
    if node.name == "template" and template_content is not None:
        return template_content.children or []
    return getattr(node, "children", None) or []


def _render_node(node: Any, builder: HtmlBuilder) -> None:
    name: str = node.name

    if name == "#text":
        builder.write_escaped_text(node.data)
        return

    if name == "#raw":
        builder.write_raw_text(node.data)
        return

    if name == "#comment":
        builder.write_raw_text(f"<!--{node.data or ''}-->")
        return

    if name == "!doctype":
        builder.write_raw_text("<!DOCTYPE html>")
        return

    if name in _CONTAINER_NODES:
        for child in _children(node):
            if child is not None:
                _render_node(child, builder)
        return

    # Element node
    is_void = name in VOID_ELEMENTS
    tag = builder.open_empty_tag(name) if is_void else builder.open_tag(name)
    attrs: dict[str, str | None] = getattr(node, "attrs", None) or {}
    for key, value in attrs.items():
        if value is None:
            tag.add_flag_attribute(key)
        else:
            tag.add_attribute(key, str(value))
    tag.finalize_tag()

    if is_void:
        return

    for child in _children(node):
        if child is not None:
            _render_node(child, builder)
    builder.close_tag(name)
