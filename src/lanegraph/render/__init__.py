"""Rendering of computed layouts to SVG and HTML."""

from lanegraph.render.html import render_html
from lanegraph.render.style import Theme
from lanegraph.render.svg import render_svg

__all__ = ["Theme", "render_html", "render_svg"]
