"""Push Force Scan (PFS) overlap removal.

Kazuo Misue, Peter Eades, Wei Lai, Kozo Sugiyama. Layout Adjustment and the
Mental Map. Journal of Visual Languages & Computing 6(2), 1995, 183-210.
https://doi.org/10.1006/jvlc.1995.1010

Nodes are pushed apart with one scan along X followed by one scan along Y.
Both scans read the original positions and accumulate their moves in a staged
copy that is committed at the end, so the orthogonal order of the nodes is
preserved.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from ..algorithm import Algorithm, AlgorithmResult, create_function, register_algorithm
from ..graph import Graph
from ..validate import ValidationError, validate_padding
from .config import get_default_options, set_default_options
from .model import AXES, Axis, PFSOptions, PreconditionViolation, StagedPositions
from .scan import delta, group_by_axis, max_magnitude, scan_axis

logger = logging.getLogger(__name__)

OptionsLike = Union[PFSOptions, Mapping[str, Any], None]


def normalize_options(options: OptionsLike) -> PFSOptions:
    """Resolve ``options`` into a validated :class:`PFSOptions`.

    ``None`` selects the configured defaults; a mapping may override
    ``padding`` only.
    """

    if options is None:
        resolved = get_default_options()
    elif isinstance(options, PFSOptions):
        resolved = PFSOptions(padding=options.padding)
    elif isinstance(options, Mapping):
        unknown = set(options) - {"padding"}
        if unknown:
            raise ValidationError(f"unknown PFS option(s): {sorted(unknown)}")
        resolved = get_default_options()
        if "padding" in options:
            resolved.padding = options["padding"]
    else:
        raise ValidationError(f"expected PFSOptions or mapping, got {type(options).__name__}")
    resolved.padding = validate_padding(resolved.padding)
    return resolved


@create_function("PFS", normalize_options=normalize_options)
def pfs(graph: Graph, options: PFSOptions) -> AlgorithmResult:
    """Remove node overlaps in ``graph`` in place.

    ``graph.nodes`` is left sorted by the original Y coordinate. Raises
    :class:`PreconditionViolation` if the node list changes during the run;
    node positions are then left untouched.
    """

    padding = options.padding
    nodes = graph.nodes
    staged = StagedPositions.from_nodes(nodes)
    logger.info("Staged %d node position(s)", len(staged))

    nodes.sort(key=lambda node: node.x)
    scan_axis(nodes, "x", padding, staged)

    nodes.sort(key=lambda node: node.y)
    scan_axis(nodes, "y", padding, staged)

    moved = staged.commit(nodes)
    logger.info("Committed positions: %d of %d node(s) moved", moved, len(nodes))
    return AlgorithmResult(graph=graph)


PFS_ALGORITHM = register_algorithm(
    Algorithm(
        name="PFS",
        algorithm=pfs,
        description="Push Force Scan: order-preserving node overlap removal",
    )
)


__all__ = [
    "AXES",
    "Axis",
    "PFSOptions",
    "PFS_ALGORITHM",
    "PreconditionViolation",
    "StagedPositions",
    "delta",
    "get_default_options",
    "group_by_axis",
    "max_magnitude",
    "normalize_options",
    "pfs",
    "scan_axis",
    "set_default_options",
]
