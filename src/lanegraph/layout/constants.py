"""Layout constants used across layout modules.

These are the defaults for the keyword arguments of ``compute_layout`` and
the matching CLI options.
"""

# ---------------------------------------------------------------------------
# Node box size
# ---------------------------------------------------------------------------
NODE_HEIGHT: int = 40
"""Height of every node rectangle."""

NODE_WIDTH: int = 120
"""Width of every node rectangle."""

# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------
GAP: int = 24
"""Gap between stacked nodes and between adjacent columns."""

STROKE_WIDTH: int = 2
"""Smallest offset the edge fan-out may shrink to.

Used as ``min_offset`` of the spacing sequence; ``GAP // 2`` is its
``max_offset`` and also the base horizontal travel of every edge.
"""

# ---------------------------------------------------------------------------
# Demo
# ---------------------------------------------------------------------------
DEMO_NODES: int = 48
"""Number of nodes in the built-in demonstration layout."""

DEMO_COLUMNS: int = 7
"""Number of columns the demonstration nodes are spread across."""
