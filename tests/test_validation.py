import pytest

from pfs_layout.graph import Edge, Graph, Node
from pfs_layout.validate import ValidationError, validate_graph, validate_padding


def test_validate_accepts_valid_graph():
    graph = Graph(
        nodes=[Node(0, 0, width=2, height=2, index=0), Node(1, 1, index=1)],
        edges=[Edge(0, 1)],
    )

    validate_graph(graph)


@pytest.mark.parametrize(
    "node, message_part",
    [
        (Node(float("nan"), 0), "x must be finite"),
        (Node(0, float("-inf")), "y must be finite"),
        (Node(0, 0, width=float("inf")), "width must be finite"),
        (Node(0, 0, height=-2), "size must be non-negative"),
    ],
)
def test_validate_rejects_bad_nodes(node, message_part):
    with pytest.raises(ValidationError) as exc:
        validate_graph(Graph(nodes=[node]))

    assert message_part in str(exc.value)


def test_validate_rejects_duplicate_indices():
    graph = Graph(nodes=[Node(0, 0, index=3), Node(1, 1, index=3)])

    with pytest.raises(ValidationError) as exc:
        validate_graph(graph)

    assert "duplicates node index 3" in str(exc.value)


def test_validate_rejects_dangling_edges():
    graph = Graph(nodes=[Node(0, 0, index=0)], edges=[Edge(0, 5)])

    with pytest.raises(ValidationError) as exc:
        validate_graph(graph)

    assert "unknown node index 5" in str(exc.value)


@pytest.mark.parametrize(
    "value, expected",
    [(0, 0.0), (1.5, 1.5), ("2", 2.0)],
)
def test_validate_padding_coerces_numbers(value, expected):
    assert validate_padding(value) == expected


@pytest.mark.parametrize("value", [-0.1, float("nan"), float("inf"), None, "wide"])
def test_validate_padding_rejects_bad_values(value):
    with pytest.raises(ValidationError):
        validate_padding(value)
