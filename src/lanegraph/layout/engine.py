"""Layout coordinator: combines stacking, edge enumeration and routing."""

from __future__ import annotations

__all__ = ["Layout", "compute_layout"]

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from lanegraph.layout.columns import Node
from lanegraph.layout.constants import GAP, NODE_HEIGHT, NODE_WIDTH, STROKE_WIDTH
from lanegraph.layout.edges import Edge, enumerate_edges
from lanegraph.layout.geometry import Rect
from lanegraph.layout.routing import EdgePath, route_edges
from lanegraph.layout.spacing import spacing_sequence
from lanegraph.layout.stacking import stack_columns

logger = logging.getLogger(__name__)


@dataclass
class Layout:
    """Result of one layout pass."""

    nodes: list[Node]
    rects: dict[int, Rect]
    edges: list[Edge]
    paths: list[EdgePath]
    max_height: int
    max_width: int
    gap: int = GAP
    lanes: dict[int, int] = field(default_factory=dict)
    spacing: tuple[int, ...] = (0,)

    def rect_list(self) -> list[Rect]:
        """Rectangles in node input order."""
        return [self.rects[node.id] for node in self.nodes]


def _check_positive(**values: int) -> None:
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")


def compute_layout(
    nodes: Sequence[Node],
    node_height: int = NODE_HEIGHT,
    node_width: int = NODE_WIDTH,
    gap: int = GAP,
    stroke_width: int = STROKE_WIDTH,
) -> Layout:
    """Compute rectangles and routed edge paths for column-assigned nodes.

    The fan-out sequence is ``spacing_sequence(gap // 2, stroke_width)``,
    so ``gap // 2`` must exceed ``stroke_width``.
    """
    _check_positive(
        node_height=node_height,
        node_width=node_width,
        gap=gap,
        stroke_width=stroke_width,
    )
    nodes = list(nodes)

    rects, stack = stack_columns(
        nodes, node_height=node_height, node_width=node_width, gap=gap
    )
    edges = enumerate_edges({node.id: node.column for node in nodes})
    spacing = spacing_sequence(gap // 2, stroke_width)
    paths, lanes = route_edges(rects, edges, spacing, base_gap=gap // 2)

    logger.debug(
        "laid out %d nodes in %d columns, routed %d/%d edges through %d lanes",
        len(nodes), len(stack.tops), len(paths), len(edges), len(lanes.counts),
    )

    return Layout(
        nodes=nodes,
        rects=rects,
        edges=edges,
        paths=paths,
        max_height=stack.max_height,
        max_width=stack.max_width,
        gap=gap,
        lanes=dict(lanes.counts),
        spacing=spacing,
    )
