from .graph import Edge, Graph, Node, graph_from_dict, graph_to_dict
from .geometry import Vector, diff, optimal_vector, overlap, vector
from .validate import ValidationError, validate_graph
from .algorithm import (
    ALGORITHMS,
    Algorithm,
    AlgorithmResult,
    create_function,
    get_algorithm,
    register_algorithm,
)
from .adjust import (
    PFS_ALGORITHM,
    PFSOptions,
    PreconditionViolation,
    StagedPositions,
    get_default_options,
    pfs,
    scan_axis,
    set_default_options,
)
from .metrics import (
    count_overlaps,
    layout_quality_summary,
    orthogonal_order_preserved,
    overlapping_pairs,
    total_displacement,
)

__version__ = '0.1.0'

__all__ = [
    'Node',
    'Edge',
    'Graph',
    'graph_from_dict',
    'graph_to_dict',
    'Vector',
    'overlap',
    'vector',
    'optimal_vector',
    'diff',
    'ValidationError',
    'validate_graph',
    'ALGORITHMS',
    'Algorithm',
    'AlgorithmResult',
    'create_function',
    'get_algorithm',
    'register_algorithm',
    'PFS_ALGORITHM',
    'PFSOptions',
    'PreconditionViolation',
    'StagedPositions',
    'get_default_options',
    'set_default_options',
    'pfs',
    'scan_axis',
    'count_overlaps',
    'layout_quality_summary',
    'orthogonal_order_preserved',
    'overlapping_pairs',
    'total_displacement',
]
