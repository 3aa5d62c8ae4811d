"""Rectangle geometry shared by the layout adjustment algorithms.

Nodes are axis-aligned rectangles centered on ``(x, y)``. Vectors are plain
``(dx, dy)`` tuples.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from .graph import Node
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

Vector = Tuple[float, float]

ZERO: Vector = (0.0, 0.0)

# Relative slack under which a center distance counts as touching its bound.
TOUCH_TOLERANCE = 1e-9


def _half_extents(a: Node, b: Node, padding: float) -> Vector:
    """Minimum center distance on each axis for ``a`` and ``b`` to not overlap."""

    return (
        (a.width + b.width) * 0.5 + padding,
        (a.height + b.height) * 0.5 + padding,
    )


def _penetrates(distance: float, bound: float) -> bool:
    return distance < bound and not math.isclose(distance, bound, rel_tol=TOUCH_TOLERANCE)


def overlap(a: Node, b: Node, padding: float = 0.0) -> bool:
    """Return ``True`` when the padded rectangles of ``a`` and ``b`` intersect.

    Rectangles that merely touch do not overlap; a center distance within
    ``TOUCH_TOLERANCE`` (relative) of its bound counts as touching.
    """

    wx, hy = _half_extents(a, b, padding)
    return _penetrates(abs(b.x - a.x), wx) and _penetrates(abs(b.y - a.y), hy)


def vector(a: Node, b: Node) -> Vector:
    """Vector from the center of ``a`` to the center of ``b``."""

    return (b.x - a.x, b.y - a.y)


def optimal_vector(a: Node, b: Node, padding: float = 0.0) -> Vector:
    """Shortest rescaling of ``vector(a, b)`` that separates the padded rectangles.

    The center-to-center direction is kept and the vector is stretched (or
    shrunk) until the rectangles just touch on the first axis to reach its
    bound. An axis with a zero component places no bound on the factor.
    Coincident centers have no direction and yield the zero vector.
    """

    dx, dy = vector(a, b)
    wx, hy = _half_extents(a, b, padding)
    factor = math.inf
    if dx != 0.0:
        factor = min(factor, wx / abs(dx))
    if dy != 0.0:
        factor = min(factor, hy / abs(dy))
    if math.isinf(factor):
        return ZERO
    return (dx * factor, dy * factor)


def diff(u: Vector, v: Vector) -> Vector:
    return (u[0] - v[0], u[1] - v[1])


__all__ = [
    "Vector",
    "ZERO",
    "TOUCH_TOLERANCE",
    "overlap",
    "vector",
    "optimal_vector",
    "diff",
]


apply_debug_logging(globals(), logger=logger)
