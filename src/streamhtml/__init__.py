from .attributes import TagBuilder
from .builder import HtmlBuilder
from .config import DEFAULT_CONFIG, RenderConfig
from .errors import TagProtocolError
from .escape import escape_html
from .renderers import FlatRenderer, IndentedRenderer
from .serialize import render, to_html

__all__ = [
    "DEFAULT_CONFIG",
    "FlatRenderer",
    "HtmlBuilder",
    "IndentedRenderer",
    "RenderConfig",
    "TagBuilder",
    "TagProtocolError",
    "escape_html",
    "render",
    "to_html",
]
