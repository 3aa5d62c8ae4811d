"""Data structures shared by the Push Force Scan stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Sequence

from ..graph import Node

Axis = Literal["x", "y"]

AXES: Dict[str, int] = {"x": 0, "y": 1}


def axis_index(axis: str) -> int:
    try:
        return AXES[axis]
    except KeyError as exc:
        raise ValueError(f"Unknown axis {axis!r}; expected one of {sorted(AXES)}") from exc


@dataclass
class PFSOptions:
    """Options of the Push Force Scan adjustment."""

    padding: float = 0.0


class PreconditionViolation(RuntimeError):
    """Raised when a node reaches a scan or the commit without a staged position."""

    def __init__(self, nodes: Sequence[Node], stage: str):
        names = ", ".join(repr(node) for node in nodes[:3])
        if len(nodes) > 3:
            names += f", ... ({len(nodes)} nodes)"
        super().__init__(f"{stage}: no staged position for {names}")
        self.nodes = list(nodes)
        self.stage = stage


class StagedPositions:
    """Pending node positions accumulated during one adjustment run.

    Positions live in this mapping rather than on the nodes; the real node
    coordinates are only written by :meth:`commit`.
    """

    def __init__(self) -> None:
        self._pending: Dict[Node, List[float]] = {}

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node]) -> "StagedPositions":
        staged = cls()
        for node in nodes:
            staged._pending[node] = [node.x, node.y]
        return staged

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, node: object) -> bool:
        return node in self._pending

    def position(self, node: Node) -> tuple[float, float]:
        x, y = self._pending[node]
        return (x, y)

    def missing(self, nodes: Iterable[Node]) -> List[Node]:
        return [node for node in nodes if node not in self._pending]

    def require(self, nodes: Sequence[Node], stage: str) -> None:
        """Raise :class:`PreconditionViolation` unless every node is staged."""

        missing = self.missing(nodes)
        if missing:
            raise PreconditionViolation(missing, stage)

    def shift(self, node: Node, axis: str, amount: float) -> None:
        self._pending[node][axis_index(axis)] += amount

    def commit(self, nodes: Sequence[Node]) -> int:
        """Write staged positions back onto ``nodes`` and clear the mapping.

        Coverage is checked for all nodes before the first write, so a failed
        commit leaves every node position untouched. Returns the number of
        nodes whose position changed.
        """

        self.require(nodes, "commit")
        moved = 0
        for node in nodes:
            x, y = self._pending[node]
            if x != node.x or y != node.y:
                moved += 1
            node.x = x
            node.y = y
        self._pending.clear()
        return moved


__all__ = [
    "Axis",
    "AXES",
    "axis_index",
    "PFSOptions",
    "PreconditionViolation",
    "StagedPositions",
]
