"""Theme and style constants for lane diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a lane diagram."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    edge_stroke: str
    edge_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    node_corner_radius: float = 0.0
    show_labels: bool = True
