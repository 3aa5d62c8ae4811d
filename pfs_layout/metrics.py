"""Quality measures for layout adjustments.

``before`` and ``after`` positions are mappings from node index to ``(x, y)``
as returned by :meth:`Graph.positions`.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Tuple

import numpy as np

from .geometry import overlap
from .graph import Graph

logger = logging.getLogger(__name__)

Positions = Mapping[int, Tuple[float, float]]


def overlapping_pairs(graph: Graph, padding: float = 0.0) -> List[Tuple[int, int]]:
    """Index pairs ``(a, b)`` with ``a < b`` whose padded rectangles overlap."""

    nodes = sorted(graph.nodes, key=lambda node: node.index)
    pairs: List[Tuple[int, int]] = []
    for i, a in enumerate(nodes):
        for b in nodes[i + 1:]:
            if overlap(a, b, padding):
                pairs.append((a.index, b.index))
    return pairs


def count_overlaps(graph: Graph, padding: float = 0.0) -> int:
    return len(overlapping_pairs(graph, padding))


def positions_array(positions: Positions) -> np.ndarray:
    """``(n, 2)`` array of positions ordered by node index."""

    if not positions:
        return np.zeros((0, 2), dtype=float)
    return np.array([positions[key] for key in sorted(positions)], dtype=float)


def _aligned(before: Positions, after: Positions) -> Tuple[np.ndarray, np.ndarray]:
    if set(before) != set(after):
        raise ValueError("before and after positions must cover the same node indices")
    return positions_array(before), positions_array(after)


def displacement(before: Positions, after: Positions) -> np.ndarray:
    """Euclidean distance moved by each node, ordered by node index."""

    start, end = _aligned(before, after)
    if start.size == 0:
        return np.zeros(0, dtype=float)
    return np.linalg.norm(end - start, axis=1)


def total_displacement(before: Positions, after: Positions) -> float:
    return float(displacement(before, after).sum())


def orthogonal_order_preserved(before: Positions, after: Positions) -> bool:
    """Whether no pair of nodes swaps its strict order on either axis.

    A pair that was strictly ordered may become tied, but never inverted.
    """

    start, end = _aligned(before, after)
    for axis in range(2):
        was_less = start[:, axis][:, None] < start[:, axis][None, :]
        now_greater = end[:, axis][:, None] > end[:, axis][None, :]
        if np.any(was_less & now_greater):
            return False
    return True


def layout_quality_summary(graph: Graph, before: Positions, padding: float = 0.0) -> Dict[str, float]:
    """Summarize an adjustment of ``graph`` from the ``before`` positions."""

    after = graph.positions()
    moved = displacement(before, after)
    summary = {
        "nodes": float(len(graph.nodes)),
        "overlaps": float(count_overlaps(graph, padding)),
        "total_displacement": float(moved.sum()),
        "max_displacement": float(moved.max()) if moved.size else 0.0,
        "order_preserved": 1.0 if orthogonal_order_preserved(before, after) else 0.0,
    }
    logger.info("Layout quality summary: %s", summary)
    return summary


__all__ = [
    "Positions",
    "overlapping_pairs",
    "count_overlaps",
    "positions_array",
    "displacement",
    "total_displacement",
    "orthogonal_order_preserved",
    "layout_quality_summary",
]
