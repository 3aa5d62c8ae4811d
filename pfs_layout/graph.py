"""Node-link containers consumed by the layout adjustment algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass(eq=False)
class Node:
    """Axis-aligned rectangle centered at ``(x, y)``.

    Nodes compare and hash by identity so that algorithms can key auxiliary
    per-node state on the node object itself.
    """

    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    index: int = 0
    label: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.width = float(self.width)
        self.height = float(self.height)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        name = self.label if self.label is not None else self.index
        return (
            f"Node({name!r}, x={self.x:.6g}, y={self.y:.6g}, "
            f"w={self.width:.6g}, h={self.height:.6g})"
        )


@dataclass
class Edge:
    source: int
    target: int


@dataclass
class Graph:
    """Ordered collection of nodes plus the edges between them."""

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def node_by_index(self, index: int) -> Node:
        for node in self.nodes:
            if node.index == index:
                return node
        raise KeyError(f"Unknown node index {index}")

    def positions(self) -> Dict[int, tuple[float, float]]:
        """Snapshot of node centers keyed by node index."""

        return {node.index: node.position for node in self.nodes}

    def __len__(self) -> int:
        return len(self.nodes)


def node_from_dict(payload: Mapping[str, Any], default_index: int = 0) -> Node:
    if not isinstance(payload, Mapping):
        raise TypeError(f"node must be a mapping, got {type(payload).__name__}")
    return Node(
        x=payload["x"],
        y=payload["y"],
        width=payload.get("width", 0.0),
        height=payload.get("height", 0.0),
        index=int(payload.get("index", default_index)),
        label=payload.get("label"),
        data=dict(payload.get("data") or {}),
    )


def graph_from_dict(payload: Mapping[str, Any]) -> Graph:
    """Build a :class:`Graph` from its JSON-compatible mapping form.

    Nodes without an explicit ``index`` are numbered by their position in the
    ``nodes`` list.
    """

    if not isinstance(payload, Mapping):
        raise TypeError(f"graph must be a mapping, got {type(payload).__name__}")
    nodes = [node_from_dict(item, idx) for idx, item in enumerate(payload.get("nodes", []))]
    edges = [Edge(int(item["source"]), int(item["target"])) for item in payload.get("edges", [])]
    return Graph(nodes=nodes, edges=edges)


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    nodes = []
    for node in graph.nodes:
        item: Dict[str, Any] = {
            "index": node.index,
            "x": node.x,
            "y": node.y,
            "width": node.width,
            "height": node.height,
        }
        if node.label is not None:
            item["label"] = node.label
        if node.data:
            item["data"] = dict(node.data)
        nodes.append(item)
    edges = [{"source": edge.source, "target": edge.target} for edge in graph.edges]
    return {"nodes": nodes, "edges": edges}


__all__ = [
    "Node",
    "Edge",
    "Graph",
    "node_from_dict",
    "graph_from_dict",
    "graph_to_dict",
]
