import random

import pytest

from pathgraph.errors import OutOfRange
from pathgraph.segment_tree import SegmentTree


def test_reference_scenario():
    values = [1, 3, 5, 7, 9, 11]
    tree = SegmentTree(values)
    assert tree.range_sum(0, 1) == 4

    tree.point_update(1, 9)
    assert tree.values == [1, 9, 5, 7, 9, 11]
    assert tree.range_sum(0, 1) == 10

    head = tree.range_sum(0, len(values) - 2)
    tree.point_update(len(values) - 1, 100 - head)
    assert tree.range_sum(0, len(values) - 1) == 100


def test_input_not_aliased():
    values = [1, 2, 3]
    tree = SegmentTree(values)
    tree.point_update(0, 10)
    assert values == [1, 2, 3]
    tree.values.append(4)
    assert len(tree) == 3


def test_single_element():
    tree = SegmentTree([42])
    assert tree.range_sum(0, 0) == 42
    tree.point_update(0, -1)
    assert tree.range_sum(0, 0) == -1


def test_accepts_any_iterable_and_floats():
    tree = SegmentTree(x / 2 for x in range(4))
    assert tree.range_sum(1, 3) == 3.0
    assert repr(tree) == "SegmentTree([0.0, 0.5, 1.0, 1.5])"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 8, 13, 64, 100])
def test_all_ranges_match_naive_sum(size):
    rng = random.Random(size)
    values = [rng.randint(-50, 50) for _ in range(size)]
    tree = SegmentTree(values)

    for _ in range(size):
        index = rng.randrange(size)
        values[index] = rng.randint(-50, 50)
        tree.point_update(index, values[index])

    for start in range(size):
        for end in range(start, size):
            assert tree.range_sum(start, end) == sum(values[start : end + 1])


def test_large_tree_is_not_recursive():
    size = 200_000
    tree = SegmentTree([1] * size)
    assert tree.range_sum(0, size - 1) == size
    tree.point_update(size - 1, 0)
    assert tree.range_sum(size // 2, size - 1) == size // 2 - 1


@pytest.mark.parametrize("start, end", [(-1, 2), (0, 6), (6, 6), (0, 2.0)])
def test_range_out_of_bounds(start, end):
    tree = SegmentTree([1, 3, 5, 7, 9, 11])
    with pytest.raises(OutOfRange):
        tree.range_sum(start, end)


def test_inverted_range():
    tree = SegmentTree([1, 2, 3])
    with pytest.raises(ValueError, match="greater than"):
        tree.range_sum(2, 1)


@pytest.mark.parametrize("index", [-1, 3, True])
def test_update_out_of_bounds(index):
    tree = SegmentTree([1, 2, 3])
    with pytest.raises(OutOfRange):
        tree.point_update(index, 0)
    assert tree.values == [1, 2, 3]


def test_empty_tree():
    tree = SegmentTree([])
    assert len(tree) == 0
    assert tree.values == []
    with pytest.raises(OutOfRange):
        tree.range_sum(0, 0)
    with pytest.raises(OutOfRange):
        tree.point_update(0, 1)
