"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 24.0
"""Padding around the laid-out content.

Also the minimum left margin: same-level edges in the first column bow left
of x = 0, and the left margin widens to keep them on the canvas.
"""

TITLE_BAND: float = 40.0
"""Height reserved above the content when a title is drawn."""

TITLE_BASELINE: float = 28.0
"""Baseline of the title text, measured from the top of the canvas."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for label truncation."""

LABEL_ELLIPSIS: str = "…"
"""Appended to labels cut short to fit their node."""
