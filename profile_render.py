#!/usr/bin/env python3
"""Profile streamhtml to find performance bottlenecks."""

import cProfile
import io
import pstats
from types import SimpleNamespace

from streamhtml import HtmlBuilder, RenderConfig, render


def element(name, attrs=None, *children):
    return SimpleNamespace(name=name, attrs=attrs or {}, children=list(children))


def text(data):
    return SimpleNamespace(name="#text", data=data)


def row(a, b):
    return element("tr", None, element("td", None, text(a)), element("td", None, text(b)))


# Sample tree
body = element(
    "body",
    None,
    *[
        element(
            "div",
            {"class": "container"},
            element("p", None, text("Paragraph 1 & more")),
            element("p", None, text("Paragraph <2>")),
            element("pre", None, text("  keep\n    this\n")),
            element("input", {"type": "checkbox", "checked": None}),
            element("table", None, row("Cell 1", "Cell 2"), row("Cell 3", "Cell 4")),
        )
        for _ in range(100)  # Repeat for more meaningful results
    ],
)
tree = element("html", None, element("head", None, element("title", None, text("Test"))), body)

# Profile
pr = cProfile.Profile()
pr.enable()

for indent in (None, "  "):
    for _ in range(10):
        render(tree, HtmlBuilder(io.StringIO(), RenderConfig(indent=indent)))

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(50)  # Top 50 functions
print(s.getvalue())
