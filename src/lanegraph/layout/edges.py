"""Edge enumeration from column adjacency."""

from __future__ import annotations

__all__ = ["Edge", "enumerate_edges"]

from collections.abc import Mapping
from dataclasses import dataclass
from itertools import product


@dataclass(frozen=True, order=True)
class Edge:
    """A directed edge between two node ids."""

    source: int
    target: int


def enumerate_edges(columns: Mapping[int, int | None]) -> list[Edge]:
    """Connect every node to the nodes of its own and the next column.

    ``columns`` maps node id -> column; ids mapped to None are skipped.
    An edge ``(a, b)`` exists when ``b`` is one column right of ``a``, or
    in the same column with a larger id, so a pair of nodes yields at most
    one edge.

    Returns the edges sorted by ``(source, target)``, which fixes the order
    the router fills lanes in.
    """
    edges: set[Edge] = set()
    for a, b in product(columns, repeat=2):
        if a == b:
            continue
        col_a = columns.get(a)
        col_b = columns.get(b)
        if col_a is None or col_b is None:
            continue
        if col_a == col_b and a > b:
            continue
        if col_a <= col_b and abs(col_a - col_b) <= 1:
            edges.add(Edge(source=a, target=b))
    return sorted(edges)
