"""Streaming HTML builder.

``HtmlBuilder`` is the entry point: configure it once, then issue structural
calls that mirror a depth-first walk of the tree::

    out = io.StringIO()
    html = HtmlBuilder(out).set_indent("  ")
    html.open_tag("ul").finalize_tag()
    html.open_tag("li").add_attribute("class", "first").finalize_tag()
    html.write_escaped_text("Fish & Chips")
    html.close_tag("li").close_tag("ul")

Every call writes to the sink immediately. The sink belongs to the caller:
the builder never flushes, closes or rewinds it.
"""

from __future__ import annotations

import io
import logging
from typing import Any

from .attributes import TagBuilder
from .config import DEFAULT_CONFIG, RenderConfig
from .errors import TagProtocolError
from .escape import Escaper
from .renderers import Renderer, make_renderer

logger = logging.getLogger(__name__)


class HtmlBuilder:
    __slots__ = ("_config", "_renderer", "_sink", "_started")

    def __init__(self, sink: Any, config: RenderConfig | None = None) -> None:
        self._sink = sink
        self._config = config if config is not None else DEFAULT_CONFIG
        self._started = False
        self._renderer: Renderer = self._build_renderer()

    @classmethod
    def in_memory(cls, config: RenderConfig | None = None) -> HtmlBuilder:
        """Builder over a fresh ``io.StringIO``; read the result with ``getvalue()``."""
        return cls(io.StringIO(), config)

    # -------------
    # Configuration
    # -------------

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    def _build_renderer(self) -> Renderer:
        renderer = make_renderer(self._sink, self._config, owner=self)
        logger.debug("Using %s (indent=%r)", type(renderer).__name__, self._config.indent)
        return renderer

    def _reconfigure(self, config: RenderConfig) -> HtmlBuilder:
        if self._started:
            raise TagProtocolError(
                "config-after-render-started",
                "configuration must be set before the first structural call",
            )
        self._config = config
        self._renderer = self._build_renderer()
        return self

    def set_indent(self, indent: str | None) -> HtmlBuilder:
        """Indent each nesting level with *indent*; ``None`` means compact output."""
        return self._reconfigure(self._config.with_indent(indent))

    def set_close_empty_tags(self, close_empty_tags: bool) -> HtmlBuilder:
        return self._reconfigure(self._config.with_close_empty_tags(close_empty_tags))

    def set_escaper(self, escaper: Escaper) -> HtmlBuilder:
        return self._reconfigure(self._config.with_escaper(escaper))

    # ----------------
    # Structural calls
    # ----------------

    def open_tag(self, name: str) -> TagBuilder:
        self._started = True
        return self._renderer.open_tag(name)

    def open_empty_tag(self, name: str) -> TagBuilder:
        self._started = True
        return self._renderer.open_empty_tag(name)

    def close_tag(self, name: str) -> HtmlBuilder:
        self._started = True
        self._renderer.close_tag(name)
        return self

    def write_escaped_text(self, text: str | None) -> HtmlBuilder:
        self._started = True
        self._renderer.write_escaped_text(text)
        return self

    def write_raw_text(self, text: str | None) -> HtmlBuilder:
        self._started = True
        self._renderer.write_raw_text(text)
        return self

    # ------
    # Output
    # ------

    def sink(self) -> Any:
        return self._sink

    def getvalue(self) -> str:
        """Text written so far, for sinks that support it (``io.StringIO``)."""
        return self._sink.getvalue()
