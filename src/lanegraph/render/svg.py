"""SVG generation for lane diagrams using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from lanegraph.layout.columns import Node
from lanegraph.layout.engine import Layout
from lanegraph.layout.geometry import Rect
from lanegraph.layout.routing import EdgePath
from lanegraph.render.constants import (
    CANVAS_PADDING,
    LABEL_CHAR_WIDTH_RATIO,
    LABEL_ELLIPSIS,
    TITLE_BAND,
    TITLE_BASELINE,
)
from lanegraph.render.style import Theme


def left_margin(layout: Layout, padding: float = CANVAS_PADDING) -> float:
    """Left margin wide enough for edges that bow left of x = 0."""
    xs = [pt.x for path in layout.paths for pt in path.points()]
    if not xs:
        return padding
    return max(padding, -min(xs))


def canvas_size(
    layout: Layout,
    padding: float = CANVAS_PADDING,
    title: str | None = None,
) -> tuple[int, int]:
    """Return the (width, height) of the drawing for a layout."""
    width = left_margin(layout, padding) + layout.max_width + layout.gap + padding
    height = layout.max_height + padding * 2
    if title:
        height += TITLE_BAND
    return int(width), int(height)


def render_svg(
    layout: Layout,
    theme: Theme,
    title: str | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a computed layout to an SVG string."""
    if not layout.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>\n'

    svg_width, svg_height = canvas_size(layout, padding=padding, title=title)
    d = draw.Drawing(svg_width, svg_height)

    # Background
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    top = padding
    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            padding, TITLE_BASELINE,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))
        top += TITLE_BAND

    left = left_margin(layout, padding)
    content = draw.Group(transform=f"translate({left},{top})")

    # Edges behind nodes
    _render_edges(content, layout.paths, theme)
    _render_nodes(content, layout.nodes, layout.rects, theme)

    d.append(content)

    svg = d.as_svg()
    return svg if svg.endswith("\n") else svg + "\n"


def _render_edges(
    group: draw.Group,
    paths: list[EdgePath],
    theme: Theme,
) -> None:
    """Render routed edges as move / horizontal / vertical / line-to paths."""
    for edge_path in paths:
        path = draw.Path(
            stroke=theme.edge_stroke,
            stroke_width=theme.edge_width,
            fill="none",
        )
        path.M(edge_path.start.x, edge_path.start.y)
        path.h(edge_path.horizontal)
        path.v(edge_path.vertical)
        path.L(edge_path.end.x, edge_path.end.y)
        group.append(path)


def _render_nodes(
    group: draw.Group,
    nodes: list[Node],
    rects: dict[int, Rect],
    theme: Theme,
) -> None:
    """Render node rectangles with their labels centred inside."""
    for node in nodes:
        rect = rects[node.id]
        group.append(draw.Rectangle(
            rect.x, rect.y,
            rect.width, rect.height,
            rx=theme.node_corner_radius, ry=theme.node_corner_radius,
            fill=theme.node_fill,
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
        ))

        if not theme.show_labels or not node.label:
            continue

        group.append(draw.Text(
            fit_label(node.label, rect.width, theme.label_font_size),
            theme.label_font_size,
            rect.x + rect.width / 2, rect.y + rect.height / 2,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))


def fit_label(label: str, width: float, font_size: float) -> str:
    """Shorten ``label`` with an ellipsis so it fits inside ``width``."""
    max_chars = int(width / (font_size * LABEL_CHAR_WIDTH_RATIO))
    if len(label) <= max_chars:
        return label
    if max_chars <= 1:
        return LABEL_ELLIPSIS
    return label[: max_chars - 1] + LABEL_ELLIPSIS
