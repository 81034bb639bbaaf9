"""HTML5 element constants used by the streaming serializer.

Usage:
    from streamhtml.constants import PREFORMATTED_ELEMENTS, VOID_ELEMENTS

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/grouping-content.html#the-pre-element
"""

# Elements with no end tag; the tree walker writes them with open_empty_tag()
VOID_ELEMENTS = frozenset(
    [
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    ]
)

# Whitespace inside these is significant, so indented output leaves it alone
PREFORMATTED_ELEMENTS = ("pre", "textarea")

NULL_TEXT = "null"
