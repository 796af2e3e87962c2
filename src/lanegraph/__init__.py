"""lanegraph: lay out column-assigned graphs and render them as SVG."""

from lanegraph.layout import Layout, compute_layout, nodes_from_columns
from lanegraph.parser import parse_lanes
from lanegraph.render import render_html, render_svg

__version__ = "0.1.0"

__all__ = [
    "Layout",
    "__version__",
    "compute_layout",
    "nodes_from_columns",
    "parse_lanes",
    "render_html",
    "render_svg",
]
