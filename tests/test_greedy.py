import random

import pytest

from algodrills.greedy import (
    activity_selection,
    max_meetings,
    merge_sort,
    merge_sorted,
    spanning_tree_weight,
)


def test_spanning_tree_triangle():
    graph = [[0, 5, 1], [5, 0, 3], [1, 3, 0]]
    assert spanning_tree_weight(graph) == 4


def test_spanning_tree_of_a_tree_is_its_weight():
    graph = [[0, 2, 0], [2, 0, 7], [0, 7, 0]]
    assert spanning_tree_weight(graph) == 2 + 7


def test_spanning_tree_ignores_unreachable_vertices():
    graph = [[0, 4, 0], [4, 0, 0], [0, 0, 0]]
    assert spanning_tree_weight(graph) == 4


def test_spanning_tree_single_vertex_matches_empty():
    assert spanning_tree_weight([[0]]) == spanning_tree_weight([])


def test_spanning_tree_not_heavier_than_star():
    rng = random.Random(7)
    size = 6
    graph = [[0] * size for _ in range(size)]
    for a in range(size):
        for b in range(a + 1, size):
            graph[a][b] = graph[b][a] = rng.randint(1, 20)
    star = sum(graph[0][1:])
    weight = spanning_tree_weight(graph)
    assert weight <= star
    assert weight >= (size - 1) * min(w for row in graph for w in row if w)


def test_spanning_tree_rejects_non_square():
    with pytest.raises(ValueError):
        spanning_tree_weight([[0, 1], [1, 0, 2]])


def test_merge_sorted():
    left, right = [1, 4, 9, 12], [2, 3, 10]
    assert merge_sorted(left, right) == sorted(left + right)


def test_merge_sorted_one_side_empty():
    left = [3, 5, 8]
    assert merge_sorted(left, []) == left
    assert merge_sorted([], left) == left


@pytest.mark.parametrize(
    "values", [[], [1], [5, 2, 9, 1, 5, 6], [3, -1, 0, -1, 3], list(range(20, 0, -1))]
)
def test_merge_sort(values):
    original = list(values)
    assert merge_sort(values) == sorted(original)
    assert values == original


def test_max_meetings_classic():
    starts = [1, 3, 0, 5, 8, 5]
    ends = [2, 4, 6, 7, 9, 9]
    assert max_meetings(starts, ends) == [1, 2, 4, 5]


def test_max_meetings_are_compatible():
    rng = random.Random(3)
    starts = [rng.randint(0, 50) for _ in range(15)]
    ends = [s + rng.randint(1, 10) for s in starts]
    chosen = max_meetings(starts, ends)
    assert all(1 <= p <= len(starts) for p in chosen)
    assert len(set(chosen)) == len(chosen)
    for earlier, later in zip(chosen, chosen[1:]):
        assert starts[later - 1] >= ends[earlier - 1]
    assert len(chosen) == activity_selection(starts, ends)


def test_empty_schedule():
    assert not max_meetings([], [])
    assert activity_selection([], []) == len(max_meetings([], []))


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        max_meetings([1, 2], [3])
    with pytest.raises(ValueError):
        activity_selection([1], [2, 3])