"""Single-axis push scan of the Push Force Scan adjustment."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from ..geometry import ZERO, Vector, diff, optimal_vector, overlap, vector
from ..graph import Node
from ..logging_utils import apply_debug_logging
from .model import StagedPositions, axis_index

logger = logging.getLogger(__name__)

Group = Tuple[int, int]


def delta(node1: Node, node2: Node, padding: float = 0.0) -> Vector:
    """Extra displacement of ``node2`` relative to ``node1`` that removes their overlap.

    Returns the zero vector when the padded rectangles do not overlap.
    Components may be negative.
    """

    if not overlap(node1, node2, padding):
        return ZERO
    return diff(optimal_vector(node1, node2, padding), vector(node1, node2))


def group_by_axis(nodes: Sequence[Node], axis: str) -> List[Group]:
    """Split axis-sorted ``nodes`` into maximal runs of equal coordinate.

    Each run is an inclusive ``(start, end)`` index pair; together the runs
    cover every index in order.
    """

    groups: List[Group] = []
    start = 0
    while start < len(nodes):
        key = getattr(nodes[start], axis)
        end = start
        while end + 1 < len(nodes) and getattr(nodes[end + 1], axis) == key:
            end += 1
        groups.append((start, end))
        start = end + 1
    return groups


def max_magnitude(values: Iterable[float]) -> float:
    """Signed value with the largest absolute magnitude, first one wins ties."""

    best = 0.0
    for value in values:
        if abs(value) > abs(best):
            best = value
    return best


def _group_push(nodes: Sequence[Node], group: Group, component: int, padding: float) -> float:
    start, end = group
    return max_magnitude(
        delta(nodes[m], nodes[j], padding)[component]
        for m in range(start, end + 1)
        for j in range(end + 1, len(nodes))
    )


def scan_axis(
    nodes: Sequence[Node],
    axis: str,
    padding: float,
    staged: StagedPositions,
) -> List[float]:
    """Push nodes apart along ``axis``, accumulating the moves in ``staged``.

    ``nodes`` must be sorted ascending on the current ``axis`` coordinate.
    For every tie group, the largest required push between a group member and
    any node beyond the group is added to the staged coordinate of all nodes
    beyond the group; the group itself does not move. Returns the push applied
    after each group, in scan order.
    """

    component = axis_index(axis)
    staged.require(nodes, f"scan {axis}")

    pushes: List[float] = []
    for group in group_by_axis(nodes, axis):
        end = group[1]
        if end + 1 >= len(nodes):
            break
        push = _group_push(nodes, group, component, padding)
        pushes.append(push)
        if push == 0.0:
            continue
        logger.debug("Group %s on %s pushes %d node(s) by %.6g", group, axis, len(nodes) - end - 1, push)
        for node in nodes[end + 1:]:
            staged.shift(node, axis, push)

    moved_groups = sum(1 for push in pushes if push != 0.0)
    logger.info(
        "Scanned %d node(s) on axis %s: %d of %d group(s) pushed, padding=%s",
        len(nodes),
        axis,
        moved_groups,
        len(pushes),
        padding,
    )
    return pushes


__all__ = [
    "Group",
    "delta",
    "group_by_axis",
    "max_magnitude",
    "scan_axis",
]


apply_debug_logging(globals(), logger=logger)
