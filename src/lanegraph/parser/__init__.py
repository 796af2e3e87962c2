"""Lanes document parsing."""

from lanegraph.parser.lanes import parse_lanes
from lanegraph.parser.model import LaneGraph, Link, NodeSpec

__all__ = ["LaneGraph", "Link", "NodeSpec", "parse_lanes"]
