import pytest

from pfs_layout.geometry import diff, optimal_vector, overlap, vector
from pfs_layout.graph import Node


def box(x, y, size=2.0):
    return Node(x, y, width=size, height=size)


@pytest.mark.parametrize(
    "other, padding, expected",
    [
        (box(1, 0), 0.0, True),
        (box(1, 1.5), 0.0, True),
        (box(2, 0), 0.0, False),
        (box(2, 0), 1.0, True),
        (box(0, 2), 0.0, False),
        (box(-1.5, -1.5), 0.0, True),
        (box(5, 5), 2.0, False),
    ],
)
def test_overlap_uses_padded_half_extents(other, padding, expected):
    assert overlap(box(0, 0), other, padding) is expected
    assert overlap(other, box(0, 0), padding) is expected


def test_zero_size_nodes_never_overlap_without_padding():
    a = Node(0, 0)
    b = Node(0, 0)

    assert not overlap(a, b)
    assert overlap(a, b, 0.5)


def test_vector_points_from_first_to_second_center():
    assert vector(box(1, 2), box(4, -2)) == (3.0, -4.0)


def test_diff_subtracts_componentwise():
    assert diff((3.0, 4.0), (1.0, 1.0)) == (2.0, 3.0)


@pytest.mark.parametrize(
    "other, padding, expected",
    [
        (box(1, 0), 0.0, (2.0, 0.0)),
        (box(0, -1), 0.0, (0.0, -2.0)),
        (box(1, 1), 0.0, (2.0, 2.0)),
        (box(1, 0.5), 0.0, (2.0, 1.0)),
        (box(0.5, 1), 0.0, (1.0, 2.0)),
        (box(2, 0), 2.0, (4.0, 0.0)),
        (box(-1, 0), 0.0, (-2.0, 0.0)),
    ],
)
def test_optimal_vector_keeps_direction_and_just_touches(other, padding, expected):
    assert optimal_vector(box(0, 0), other, padding) == pytest.approx(expected)


def test_optimal_vector_separates_overlapping_nodes():
    a = Node(0, 0, width=4, height=2)
    b = Node(1, 0.25, width=2, height=2)

    dx, dy = optimal_vector(a, b)
    moved = Node(a.x + dx, a.y + dy, width=b.width, height=b.height)

    assert not overlap(a, moved)


def test_optimal_vector_of_coincident_centers_is_zero():
    assert optimal_vector(box(3, 3), box(3, 3)) == (0.0, 0.0)


@pytest.mark.parametrize(
    "gap, expected",
    [
        (1e-14, False),
        (-1e-14, False),
        (1e-6, True),
    ],
)
def test_overlap_treats_rounding_at_the_bound_as_touching(gap, expected):
    a = box(0, 0)
    b = box(2.0 - gap, 0.3)

    assert overlap(a, b) is expected


def test_pushed_pair_does_not_overlap_after_rounding():
    a = Node(0.1, 0.2, width=1.3, height=2.7)
    b = Node(0.7, 0.9, width=3.1, height=1.1)

    dx, dy = optimal_vector(a, b, 0.75)
    moved = Node(a.x + dx, a.y + dy, width=b.width, height=b.height)

    assert overlap(a, b, 0.75)
    assert not overlap(a, moved, 0.75)
