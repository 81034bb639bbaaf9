"""Compact and indented render strategies.

Both write straight to the caller's sink; neither buffers. ``HtmlBuilder``
picks one of them from its ``RenderConfig`` and forwards every structural
call to it.
"""

from __future__ import annotations

import logging
from typing import Any

from .attributes import TagBuilder
from .config import RenderConfig
from .constants import PREFORMATTED_ELEMENTS
from .errors import TagProtocolError
from .escape import text_or_null

logger = logging.getLogger(__name__)


class Renderer:
    """Shared plumbing: the sink, the config, and the pending start tag."""

    __slots__ = ("_owner", "_pending", "config", "sink")

    def __init__(self, sink: Any, config: RenderConfig, owner: Any = None) -> None:
        self.sink = sink
        self.config = config
        self._owner = owner
        self._pending: TagBuilder | None = None

    @property
    def owner(self) -> Any:
        """What ``finalize_tag()`` and the text writers hand back for chaining."""
        return self._owner if self._owner is not None else self

    @property
    def pending_tag(self) -> TagBuilder | None:
        return self._pending

    def _ensure_ready(self, operation: str) -> None:
        pending = self._pending
        if pending is not None:
            logger.debug("%s while <%s> is awaiting finalize_tag()", operation, pending.name)
            raise TagProtocolError(
                "unfinalized-tag",
                f"{operation}() called before finalize_tag() on the pending start tag",
                tag_name=pending.name,
            )

    def _begin_tag(self, name: str, *, empty: bool) -> TagBuilder:
        write = self.sink.write
        write("<")
        write(name)
        builder = TagBuilder(self, name, empty=empty)
        self._pending = builder
        return builder

    def _tag_finalized(self, builder: TagBuilder) -> Any:
        self._pending = None
        return self.owner

    def open_tag(self, name: str) -> TagBuilder:
        raise NotImplementedError

    def open_empty_tag(self, name: str) -> TagBuilder:
        raise NotImplementedError

    def close_tag(self, name: str) -> Any:
        raise NotImplementedError

    def write_escaped_text(self, text: str | None) -> Any:
        self._ensure_ready("write_escaped_text")
        self._write_text(text_or_null(text, self.config.escaper))
        return self.owner

    def write_raw_text(self, text: str | None) -> Any:
        self._ensure_ready("write_raw_text")
        self._write_text(text_or_null(text))
        return self.owner

    def _write_text(self, text: str) -> None:
        raise NotImplementedError


class FlatRenderer(Renderer):
    """Compact output: nothing but the markup itself."""

    __slots__ = ()

    def open_tag(self, name: str) -> TagBuilder:
        self._ensure_ready("open_tag")
        return self._begin_tag(name, empty=False)

    def open_empty_tag(self, name: str) -> TagBuilder:
        self._ensure_ready("open_empty_tag")
        return self._begin_tag(name, empty=True)

    def close_tag(self, name: str) -> Any:
        self._ensure_ready("close_tag")
        write = self.sink.write
        write("</")
        write(name)
        write(">")
        return self.owner

    def _write_text(self, text: str) -> None:
        self.sink.write(text)


class IndentedRenderer(Renderer):
    """One structural line per tag or text line, indented by nesting depth.

    Dealing with preformatted elements (pre and textarea) requires knowing
    every open ancestor, not just the parent: a ``<b>`` inside a ``<pre>``
    must not be indented either. Start tags push onto ``_stack`` and end tags
    pop, so preformatted context is a membership test on the stack and the
    indent depth is its length.
    """

    __slots__ = ("_stack", "indent")

    def __init__(self, sink: Any, config: RenderConfig, owner: Any = None) -> None:
        indent = config.indent
        if indent is None:
            raise ValueError("IndentedRenderer needs a config with an indent unit")
        super().__init__(sink, config, owner)
        self.indent: str = indent
        self._stack: list[str] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def open_elements(self) -> tuple[str, ...]:
        return tuple(self._stack)

    def is_preformatted(self) -> bool:
        stack = self._stack
        return any(name in stack for name in PREFORMATTED_ELEMENTS)

    def _write_indent(self) -> None:
        if self.is_preformatted():
            return
        depth = len(self._stack)
        if depth:
            self.sink.write(self.indent * depth)

    def open_tag(self, name: str) -> TagBuilder:
        self._ensure_ready("open_tag")
        # Indent at the parent's depth; children see the pushed name.
        self._write_indent()
        self._stack.append(name)
        return self._begin_tag(name, empty=False)

    def open_empty_tag(self, name: str) -> TagBuilder:
        self._ensure_ready("open_empty_tag")
        self._write_indent()
        return self._begin_tag(name, empty=True)

    def close_tag(self, name: str) -> Any:
        self._ensure_ready("close_tag")
        if not self._stack:
            logger.debug("close_tag(%r) with no open elements", name)
            raise TagProtocolError(
                "unbalanced-end-tag",
                "close_tag() called with no open start tag",
                tag_name=name,
            )
        # Pop first: the end tag sits at the element's own depth, and closing
        # the outermost <pre> restores normal formatting for its end tag.
        self._stack.pop()
        write = self.sink.write
        if self.is_preformatted():
            write("</")
            write(name)
            write(">")
        else:
            self._write_indent()
            write("</")
            write(name)
            write(">\n")
        return self.owner

    def _write_text(self, text: str) -> None:
        if self.is_preformatted():
            self.sink.write(text)
            return
        lines = text.split("\n")
        # Trailing newlines do not start more (blank) lines; "" is one empty line.
        if text:
            while lines and not lines[-1]:
                lines.pop()
        write = self.sink.write
        for line in lines:
            self._write_indent()
            write(line)
            write("\n")

    def _tag_finalized(self, builder: TagBuilder) -> Any:
        if not self.is_preformatted():
            self.sink.write("\n")
        return super()._tag_finalized(builder)


def make_renderer(sink: Any, config: RenderConfig, owner: Any = None) -> Renderer:
    """Pick the strategy for *config*: indented when an indent unit is set."""
    if config.indented:
        return IndentedRenderer(sink, config, owner)
    return FlatRenderer(sink, config, owner)
