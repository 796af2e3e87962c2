"""Parser for lanes documents.

A lanes document is a Mermaid-flavoured node list with %%lanes directives::

    %%lanes title: Build pipeline
    %%lanes column: lint | 0
    graph LR
        fetch[Fetch sources]
        fetch --> build
        build --> test

Uses a simple line-by-line approach rather than a full grammar parser,
since the subset we need is straightforward.
"""

from __future__ import annotations

import re

from lanegraph.parser.model import LaneGraph, Link, NodeSpec

_ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

# Node patterns: id[label], id(label), id{label}, bare id
_NODE_PATTERNS = [
    re.compile(rf"^({_ID})\[(.+?)\]$"),
    re.compile(rf"^({_ID})\((.+?)\)$"),
    re.compile(rf"^({_ID})\{{(.+?)\}}$"),
    re.compile(rf"^({_ID})$"),
]

# Link pattern: source --> target, optional |label| ignored
_LINK_PATTERN = re.compile(
    rf"^({_ID})\s*"  # source
    r"(?:-->|---|==>)"  # arrow
    r"(?:\|[^|]*\|)?\s*"  # optional |label|
    rf"({_ID})$"  # target
)

_COLUMN_PATTERN = re.compile(rf"^({_ID})\s*\|\s*(-?\d+)$")


def parse_lanes(text: str) -> LaneGraph:
    """Parse a lanes document.

    Raises ValueError, naming the line, for malformed %%lanes directives
    and lines that are neither a node nor a link.
    """
    graph = LaneGraph()

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("%%lanes"):
            _parse_directive(stripped, graph, lineno)
            continue

        # Skip regular comments and graph declaration
        if stripped.startswith("%%") or stripped.startswith("graph "):
            continue

        if "-->" in stripped or "---" in stripped or "==>" in stripped:
            _parse_link(stripped, graph, lineno)
            continue

        _parse_node(stripped, graph, lineno)

    return graph


def _parse_directive(line: str, graph: LaneGraph, lineno: int) -> None:
    """Parse a %%lanes directive line."""
    content = line[len("%%lanes") :].strip()

    if content.startswith("title:"):
        graph.title = content[len("title:") :].strip()
    elif content.startswith("column:"):
        m = _COLUMN_PATTERN.match(content[len("column:") :].strip())
        if not m:
            raise ValueError(
                f"line {lineno}: expected '%%lanes column: <id> | <column>', "
                f"got {line!r}"
            )
        column = int(m.group(2))
        if column < 0:
            raise ValueError(f"line {lineno}: column must not be negative")
        graph.ensure_node(m.group(1))
        graph.pinned[m.group(1)] = column
    else:
        raise ValueError(f"line {lineno}: unknown directive {line!r}")


def _parse_node(line: str, graph: LaneGraph, lineno: int) -> None:
    """Parse a node definition line."""
    for pattern in _NODE_PATTERNS:
        m = pattern.match(line)
        if m:
            name = m.group(1)
            label = m.group(2).strip() if m.lastindex >= 2 else name
            if name in graph.nodes:
                # Label a node first seen in a link
                graph.nodes[name].label = label
            else:
                graph.add_node(NodeSpec(name=name, label=label))
            return
    raise ValueError(f"line {lineno}: cannot parse {line!r}")


def _parse_link(line: str, graph: LaneGraph, lineno: int) -> None:
    """Parse a link line, declaring both ends if they are new."""
    m = _LINK_PATTERN.match(line)
    if not m:
        raise ValueError(f"line {lineno}: cannot parse link {line!r}")

    source, target = m.group(1), m.group(2)
    graph.ensure_node(source)
    graph.ensure_node(target)
    graph.add_link(Link(source=source, target=target))
