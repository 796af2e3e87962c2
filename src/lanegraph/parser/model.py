"""Data model for lanes documents."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NodeSpec:
    """A node declared in a lanes document."""

    name: str
    label: str


@dataclass
class Link:
    """A declared dependency between two nodes.

    Links only steer column assignment; rendered edges come from column
    adjacency.
    """

    source: str
    target: str


@dataclass
class LaneGraph:
    """A parsed lanes document."""

    title: str = ""
    nodes: dict[str, NodeSpec] = field(default_factory=dict)
    links: list[Link] = field(default_factory=list)
    # Explicit %%lanes column: directives, node name -> column
    pinned: dict[str, int] = field(default_factory=dict)

    def add_node(self, node: NodeSpec) -> None:
        self.nodes[node.name] = node

    def ensure_node(self, name: str) -> NodeSpec:
        """Return the node called ``name``, declaring it if unseen."""
        node = self.nodes.get(name)
        if node is None:
            node = NodeSpec(name=name, label=name)
            self.add_node(node)
        return node

    def add_link(self, link: Link) -> None:
        self.links.append(link)

    def node_ids(self) -> dict[str, int]:
        """Map node names to integer ids in order of first appearance."""
        return {name: i for i, name in enumerate(self.nodes)}
