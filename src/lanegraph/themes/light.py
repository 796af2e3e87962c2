"""Light theme."""

from lanegraph.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    node_fill="#f4f6f8",
    node_stroke="#333333",
    node_stroke_width=1.5,
    edge_stroke="#5b6b7a",
    edge_width=1.5,
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#111111",
    title_font_size=22.0,
    node_corner_radius=4.0,
)
