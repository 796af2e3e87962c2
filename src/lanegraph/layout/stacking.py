"""Column stacking: place one rectangle per node.

Nodes of a column stack top to bottom in input order, ``node_height + gap``
apart. Columns are ``node_width + gap`` apart.
"""

from __future__ import annotations

__all__ = ["ColumnStack", "stack_columns"]

from collections.abc import Iterable
from dataclasses import dataclass, field

from lanegraph.layout.columns import Node
from lanegraph.layout.constants import GAP, NODE_HEIGHT, NODE_WIDTH
from lanegraph.layout.geometry import Point, Rect


@dataclass
class ColumnStack:
    """Running state of one stacking pass.

    ``tops`` maps a column to the top y of the last rectangle placed in it;
    ``max_height`` and ``max_width`` are the canvas bounds so far.
    """

    node_height: int = NODE_HEIGHT
    node_width: int = NODE_WIDTH
    gap: int = GAP
    tops: dict[int, int] = field(default_factory=dict)
    max_height: int = 0
    max_width: int = 0

    def place(self, node: Node) -> Rect:
        x = node.column * (self.node_width + self.gap)
        last_top = self.tops.get(node.column)
        y = 0 if last_top is None else last_top + self.node_height + self.gap

        rect = Rect(
            height=self.node_height,
            width=self.node_width,
            top_left=Point(x, y),
        )

        self.max_height = max(self.max_height, rect.bottom)
        self.max_width = max(self.max_width, rect.right)
        self.tops[node.column] = y
        return rect


def stack_columns(
    nodes: Iterable[Node],
    node_height: int = NODE_HEIGHT,
    node_width: int = NODE_WIDTH,
    gap: int = GAP,
) -> tuple[dict[int, Rect], ColumnStack]:
    """Place a rectangle for every node, in input order.

    Returns a dict mapping node id -> Rect (insertion-ordered like the
    input) and the filled ``ColumnStack`` holding the canvas bounds.
    """
    stack = ColumnStack(node_height=node_height, node_width=node_width, gap=gap)
    rects: dict[int, Rect] = {}
    for node in nodes:
        if node.id in rects:
            raise ValueError(f"duplicate node id {node.id}")
        rects[node.id] = stack.place(node)
    return rects, stack
