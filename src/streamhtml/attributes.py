"""Attribute phase of a start tag.

``open_tag()``/``open_empty_tag()`` write ``<name`` and hand back a
``TagBuilder``. Attributes stream straight to the sink, and
``finalize_tag()`` writes the closing bracket. Until then the renderer that
issued the builder refuses every other structural call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import TagProtocolError
from .escape import text_or_null

if TYPE_CHECKING:
    from .renderers import Renderer

logger = logging.getLogger(__name__)


class TagBuilder:
    __slots__ = ("_closed", "_renderer", "empty", "name")

    def __init__(self, renderer: Renderer, name: str, *, empty: bool = False) -> None:
        self._renderer = renderer
        self._closed = False
        self.name = name
        self.empty = empty

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self, operation: str) -> None:
        if self._closed:
            logger.debug("%s on already finalized <%s>", operation, self.name)
            raise TagProtocolError(
                "tag-already-finalized",
                f"{operation}() called after finalize_tag()",
                tag_name=self.name,
            )

    def add_attribute(self, name: str, value: str | None) -> TagBuilder:
        """Write `` name="value"`` with the value run through the escaper."""
        self._ensure_open("add_attribute")
        write = self._renderer.sink.write
        write(" ")
        write(name)
        write('="')
        write(text_or_null(value, self._renderer.config.escaper))
        write('"')
        return self

    def add_flag_attribute(self, name: str) -> TagBuilder:
        """Write a valueless attribute such as `` disabled``."""
        self._ensure_open("add_flag_attribute")
        write = self._renderer.sink.write
        write(" ")
        write(name)
        return self

    def finalize_tag(self):
        """Close the start tag bracket and return the owning builder."""
        self._ensure_open("finalize_tag")
        self._closed = True
        write = self._renderer.sink.write
        if self.empty and self._renderer.config.close_empty_tags:
            write("/")
        write(">")
        return self._renderer._tag_finalized(self)

    def __repr__(self):
        state = "closed" if self._closed else "open"
        return f"TagBuilder({self.name!r}, empty={self.empty}, {state})"
