"""Greedy exercises: minimum spanning tree, merging, meeting and activity selection."""

from __future__ import annotations

import math


def spanning_tree_weight(graph):
    """Return the weight of a minimum spanning tree of an adjacency matrix.

    A zero entry means there is no edge. Vertices unreachable from vertex 0
    contribute nothing to the total.
    """
    matrix = [list(row) for row in graph]
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not size:
        return 0

    dist = [math.inf] * size
    dist[0] = 0
    visited = [False] * size
    for _ in range(size - 1):
        frontier = [v for v in range(size) if not visited[v] and dist[v] < math.inf]
        if not frontier:
            break
        u = min(frontier, key=dist.__getitem__)
        visited[u] = True
        for v, weight in enumerate(matrix[u]):
            if not visited[v] and weight and weight < dist[v]:
                dist[v] = weight
    return sum(d for d in dist if d < math.inf)


def merge_sorted(left, right):
    """Merge two sorted sequences into one sorted list, preferring ``left`` on ties."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values):
    """Return a new sorted list of ``values``."""
    values = list(values)
    if len(values) <= 1:
        return values
    middle = len(values) // 2
    return merge_sorted(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _select_by_end(starts, ends):
    starts, ends = list(starts), list(ends)
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    order = sorted(range(len(ends)), key=ends.__getitem__)
    chosen = []
    last_end = None
    for index in order:
        if last_end is None or starts[index] >= last_end:
            chosen.append(index)
            last_end = ends[index]
    return chosen


def max_meetings(starts, ends):
    """Return the 1-based positions of a largest set of non-overlapping meetings."""
    return [index + 1 for index in _select_by_end(starts, ends)]


def activity_selection(starts, ends):
    """Return how many non-overlapping activities one person can attend."""
    return len(_select_by_end(starts, ends))