"""Edge routing between placed node rectangles.

Every edge becomes a three-segment elbow: a horizontal run out of the
source, a vertical run to the target's row, then a straight line into the
target's left-middle anchor. The horizontal run length is where edges that
share a lane are fanned out (see ``lanegraph.layout.spacing``).

Cross-column edges leave from the right-middle of the source and claim the
target's lane. Same-level edges (source and target in one column) leave
from the left-middle, claim their own column's lane and bow out to the
left.
"""

from __future__ import annotations

__all__ = ["EdgePath", "LaneOccupancy", "route_edges"]

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from lanegraph.layout.edges import Edge
from lanegraph.layout.geometry import Point, Rect
from lanegraph.layout.spacing import lane_offset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgePath:
    """A routed edge: move, horizontal, vertical, line-to."""

    edge: Edge
    start: Point
    horizontal: int
    vertical: int
    end: Point
    same_level: bool = False

    @property
    def elbow(self) -> Point:
        """Where the vertical run ends and the closing line begins."""
        return self.start + Point(self.horizontal, self.vertical)

    def points(self) -> list[Point]:
        return [
            self.start,
            self.start + Point(self.horizontal, 0),
            self.elbow,
            self.end,
        ]

    def svg_d(self) -> str:
        return (
            f"M {self.start.svg_path_point()} "
            f"h {self.horizontal} "
            f"v {self.vertical} "
            f"L {self.end.svg_path_point()}"
        )


@dataclass
class LaneOccupancy:
    """Number of edges routed through each lane, keyed by lane x."""

    counts: dict[int, int] = field(default_factory=dict)

    def get(self, lane: int) -> int:
        return self.counts.get(lane, 0)

    def claim(self, lane: int) -> int:
        """Record one more edge in ``lane`` and return the new count."""
        self.counts[lane] = self.counts.get(lane, 0) + 1
        return self.counts[lane]


def route_edges(
    rects: Mapping[int, Rect],
    edges: Iterable[Edge],
    spacing: tuple[int, ...],
    base_gap: int,
) -> tuple[list[EdgePath], LaneOccupancy]:
    """Route every edge, in iteration order, between its rectangles.

    ``base_gap`` is the horizontal travel before fan-out; the lane's
    occupancy picks an offset from ``spacing`` that is added to it.
    Edges whose source or target has no rectangle are skipped.

    Returns the paths and the lane occupancy they produced.
    """
    lanes = LaneOccupancy()
    paths: list[EdgePath] = []

    for edge in edges:
        start = rects.get(edge.source)
        end = rects.get(edge.target)
        if start is None or end is None:
            logger.debug(
                "skipping edge %d -> %d: no rectangle for endpoint",
                edge.source, edge.target,
            )
            continue

        same_level = start.x == end.x
        if same_level:
            count = lanes.get(start.x)
            lanes.claim(start.x)
            path_start = start.left_middle
        else:
            count = lanes.claim(end.x)
            path_start = start.right_middle

        travel = base_gap + lane_offset(spacing, count)

        paths.append(EdgePath(
            edge=edge,
            start=path_start,
            horizontal=-travel if same_level else travel,
            vertical=end.top_left.y_diff(start.top_left),
            end=end.left_middle,
            same_level=same_level,
        ))

    return paths, lanes
