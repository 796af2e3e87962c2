"""Minimal HTML page embedding a rendered lane diagram."""

from __future__ import annotations

from html import escape

from lanegraph.layout.engine import Layout
from lanegraph.render.constants import CANVAS_PADDING
from lanegraph.render.style import Theme
from lanegraph.render.svg import render_svg

_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
</head>
<body>
{svg}
</body>
</html>
"""


def render_html(
    layout: Layout,
    theme: Theme,
    title: str | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a computed layout as a standalone HTML document."""
    svg = render_svg(layout, theme, title=title, padding=padding)
    # Drop the XML declaration; it is not allowed inside an HTML body.
    if svg.startswith("<?xml"):
        svg = svg.split("?>", 1)[1].lstrip()
    return _PAGE.format(title=escape(title or "lanegraph"), svg=svg.rstrip("\n"))
