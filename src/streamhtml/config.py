"""Render configuration.

A ``RenderConfig`` is frozen: renderers copy what they need from it when
they are built, and nothing in the package reads configuration from
module-level state. ``DEFAULT_CONFIG`` is simply the value ``HtmlBuilder``
starts from when the caller does not pass one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .escape import Escaper, escape_html


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Settings that pick and parameterize a renderer.

    - ``indent``: the string written once per nesting level. ``None`` selects
      compact output with no inserted whitespace at all.
    - ``close_empty_tags``: write ``<br/>`` instead of ``<br>`` for empty tags.
      End tags are never affected.
    - ``escaper``: applied to escaped text and attribute values.
    """

    indent: str | None = None
    close_empty_tags: bool = False
    escaper: Escaper = field(default=escape_html)

    def __post_init__(self) -> None:
        if self.indent is not None and not isinstance(self.indent, str):
            object.__setattr__(self, "indent", str(self.indent))
        object.__setattr__(self, "close_empty_tags", bool(self.close_empty_tags))
        if not callable(self.escaper):
            raise TypeError(f"escaper must be callable, got {type(self.escaper).__name__}")

    @property
    def indented(self) -> bool:
        return self.indent is not None

    def with_indent(self, indent: str | None) -> RenderConfig:
        return replace(self, indent=indent)

    def with_close_empty_tags(self, close_empty_tags: bool) -> RenderConfig:
        return replace(self, close_empty_tags=close_empty_tags)

    def with_escaper(self, escaper: Escaper) -> RenderConfig:
        return replace(self, escaper=escaper)


DEFAULT_CONFIG = RenderConfig()
