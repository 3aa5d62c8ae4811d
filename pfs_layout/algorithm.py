"""Named, invocable layout adjustment algorithms.

An algorithm is a ``(graph, options) -> AlgorithmResult`` function wrapped by
:func:`create_function`, which normalizes and validates the graph argument
before delegating. Wrapped algorithms are registered by name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .graph import Graph, graph_from_dict
from .logging_utils import debug_log_call
from .validate import ValidationError, validate_graph

logger = logging.getLogger(__name__)

GraphLike = Union[Graph, Mapping[str, Any]]


@dataclass
class AlgorithmResult:
    graph: Graph


AlgorithmFunction = Callable[..., AlgorithmResult]


@dataclass
class Algorithm:
    """A layout adjustment function published under a name."""

    name: str
    algorithm: AlgorithmFunction
    description: str = ""

    def __call__(self, graph: GraphLike, options: Any = None) -> AlgorithmResult:
        return self.algorithm(graph, options)


def normalize_graph(graph: GraphLike) -> Graph:
    """Return a validated :class:`Graph` for ``graph``.

    A :class:`Graph` is used as is, so the algorithm mutates the caller's
    instance; a mapping is converted with :func:`graph_from_dict` first.
    """

    if isinstance(graph, Graph):
        normalized = graph
    elif isinstance(graph, Mapping):
        try:
            normalized = graph_from_dict(graph)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"malformed graph mapping: {exc}") from exc
    else:
        raise ValidationError(f"expected a Graph or mapping, got {type(graph).__name__}")
    validate_graph(normalized)
    return normalized


def create_function(
    name: str,
    *,
    normalize_options: Optional[Callable[[Any], Any]] = None,
) -> Callable[[AlgorithmFunction], AlgorithmFunction]:
    """Adapt a ``(graph, options)`` function into the algorithm calling convention."""

    def decorator(func: AlgorithmFunction) -> AlgorithmFunction:
        traced = debug_log_call(logging.getLogger(f"{__name__}.{name}"), name=name)(func)

        @wraps(func)
        def runner(graph: GraphLike, options: Any = None) -> AlgorithmResult:
            normalized = normalize_graph(graph)
            if normalize_options is not None:
                options = normalize_options(options)
            logger.info(
                "Running %s on %d node(s) and %d edge(s) with options=%s",
                name,
                len(normalized.nodes),
                len(normalized.edges),
                options,
            )
            result = traced(normalized, options)
            logger.info("%s finished", name)
            return result

        setattr(runner, "algorithm_name", name)
        return runner

    return decorator


ALGORITHMS: Dict[str, Algorithm] = {}


def register_algorithm(algorithm: Algorithm) -> Algorithm:
    ALGORITHMS[algorithm.name] = algorithm
    return algorithm


def get_algorithm(name: str) -> Algorithm:
    """Get a registered algorithm by name.

    Raises:
        ValueError: If no algorithm is registered under ``name``
    """
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {name}. Available: {list(ALGORITHMS.keys())}")
    return ALGORITHMS[name]


__all__ = [
    "Algorithm",
    "AlgorithmResult",
    "AlgorithmFunction",
    "GraphLike",
    "ALGORITHMS",
    "create_function",
    "get_algorithm",
    "normalize_graph",
    "register_algorithm",
]
