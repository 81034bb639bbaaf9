"""Default text escaper and the absent-text contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import overload

from .constants import NULL_TEXT

Escaper = Callable[[str], str]


@overload
def escape_html(text: str) -> str: ...


@overload
def escape_html(text: None) -> None: ...


def escape_html(text: str | None) -> str | None:
    """Replace the five HTML-reserved characters with character references.

    Safe for both element content and double-quoted attribute values.
    ``None`` is passed through untouched.
    """
    if text is None:
        return None
    # '&' first, otherwise the other replacements get double-escaped.
    return (
        str(text)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def text_or_null(text: str | None, escaper: Escaper | None = None) -> str:
    """Return *text* run through *escaper*, or the literal ``null`` when absent."""
    if text is None:
        return NULL_TEXT
    if escaper is None:
        return text
    return escaper(text)
