"""Nodes and column assignment.

The layout core takes columns as given. This module builds the core's
``Node`` sequence, either straight from a list of columns or from a parsed
lanes document, where unpinned nodes are placed by longest-path layering
so that every link points to the same column or further right.
"""

from __future__ import annotations

__all__ = [
    "Node",
    "assign_columns",
    "modulo_columns",
    "nodes_from_columns",
    "nodes_from_graph",
]

from collections.abc import Sequence
from dataclasses import dataclass

import networkx as nx

from lanegraph.parser.model import LaneGraph


@dataclass(frozen=True)
class Node:
    """A node of the layout, pinned to a column."""

    id: int
    column: int
    label: str = ""


def nodes_from_columns(
    columns: Sequence[int],
    labels: Sequence[str] | None = None,
) -> list[Node]:
    """Build nodes whose ids are their positions in ``columns``."""
    if labels is not None and len(labels) != len(columns):
        raise ValueError(
            f"got {len(labels)} labels for {len(columns)} columns"
        )
    nodes = []
    for i, column in enumerate(columns):
        if column < 0:
            raise ValueError(f"node {i} has negative column {column}")
        label = labels[i] if labels is not None else str(i)
        nodes.append(Node(id=i, column=column, label=label))
    return nodes


def modulo_columns(count: int, columns: int) -> list[int]:
    """Spread ``count`` nodes round-robin across ``columns`` columns."""
    if columns <= 0:
        raise ValueError(f"columns must be positive, got {columns}")
    return [i % columns for i in range(count)]


def assign_columns(graph: LaneGraph) -> dict[str, int]:
    """Assign each node of a lanes document to a column.

    Pinned nodes keep their column. Every other node sits one column right
    of its furthest-right predecessor, or in column 0 without
    predecessors.

    Returns a dict mapping node name -> column.
    """
    G = nx.DiGraph()
    for name in graph.nodes:
        G.add_node(name)
    # Pinned nodes ignore their predecessors, which also breaks any cycle
    # running through them.
    for link in graph.links:
        if link.target not in graph.pinned:
            G.add_edge(link.source, link.target)

    try:
        topo_order = list(nx.topological_sort(G))
    except nx.NetworkXUnfeasible as e:
        raise ValueError(
            "links contain a cycle; pin a node on it with a "
            "'%%lanes column:' directive"
        ) from e

    columns: dict[str, int] = {}
    for name in topo_order:
        if name in graph.pinned:
            columns[name] = graph.pinned[name]
            continue
        preds = list(G.predecessors(name))
        if not preds:
            columns[name] = 0
        else:
            columns[name] = max(columns[p] for p in preds) + 1

    return columns


def nodes_from_graph(graph: LaneGraph, columns: dict[str, int]) -> list[Node]:
    """Build layout nodes, in declaration order, from a column map."""
    missing = [name for name in graph.nodes if name not in columns]
    if missing:
        raise ValueError(f"no column for nodes: {', '.join(missing)}")
    return [
        Node(id=i, column=columns[name], label=graph.nodes[name].label)
        for name, i in graph.node_ids().items()
    ]
