import math
from typing import Set

from .graph import Graph


class ValidationError(Exception):
    pass


def _ensure_finite(value: float, what: str) -> None:
    if not math.isfinite(value):
        raise ValidationError(f'{what} must be finite (got {value!r})')


def validate_graph(graph: Graph) -> None:
    seen: Set[int] = set()
    for pos, node in enumerate(graph.nodes):
        where = f'node #{pos} (index {node.index})'
        _ensure_finite(node.x, f'{where} x')
        _ensure_finite(node.y, f'{where} y')
        _ensure_finite(node.width, f'{where} width')
        _ensure_finite(node.height, f'{where} height')
        if node.width < 0 or node.height < 0:
            raise ValidationError(f'{where} size must be non-negative (got {node.width}x{node.height})')
        if node.index in seen:
            raise ValidationError(f'{where} duplicates node index {node.index}')
        seen.add(node.index)
    for pos, edge in enumerate(graph.edges):
        for end in (edge.source, edge.target):
            if end not in seen:
                raise ValidationError(f'edge #{pos} references unknown node index {end}')


def validate_padding(padding: object) -> float:
    try:
        value = float(padding)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValidationError(f'padding must be a number (got {padding!r})') from exc
    _ensure_finite(value, 'padding')
    if value < 0:
        raise ValidationError(f'padding must be non-negative (got {value})')
    return value
