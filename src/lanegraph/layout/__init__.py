"""Layout engine: column stacking, edge enumeration and lane routing."""

from lanegraph.layout.columns import (
    Node,
    assign_columns,
    modulo_columns,
    nodes_from_columns,
    nodes_from_graph,
)
from lanegraph.layout.edges import Edge, enumerate_edges
from lanegraph.layout.engine import Layout, compute_layout
from lanegraph.layout.geometry import Point, Rect
from lanegraph.layout.routing import EdgePath, LaneOccupancy, route_edges
from lanegraph.layout.spacing import lane_offset, spacing_sequence
from lanegraph.layout.stacking import ColumnStack, stack_columns

__all__ = [
    "ColumnStack",
    "Edge",
    "EdgePath",
    "LaneOccupancy",
    "Layout",
    "Node",
    "Point",
    "Rect",
    "assign_columns",
    "compute_layout",
    "enumerate_edges",
    "lane_offset",
    "modulo_columns",
    "nodes_from_columns",
    "nodes_from_graph",
    "route_edges",
    "spacing_sequence",
    "stack_columns",
]
