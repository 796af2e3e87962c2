"""Classic theme: green boxes joined by thin purple edges."""

from lanegraph.render.style import Theme

CLASSIC_THEME = Theme(
    name="classic",
    background_color="none",
    node_fill="#00cc00",
    node_stroke="#006600",
    node_stroke_width=1.0,
    edge_stroke="purple",
    edge_width=1.0,
    label_color="#003300",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#111111",
    title_font_size=20.0,
)
