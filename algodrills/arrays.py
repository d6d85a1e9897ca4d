"""Array exercises: index gaps, pairing, waves, majorities and missing positives."""

from __future__ import annotations

from collections import Counter, deque
from itertools import accumulate, count
from typing import Any


def max_index_diff(values):
    """Return the largest ``j - i`` such that ``i <= j`` and ``values[i] <= values[j]``."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    prefix_min = list(accumulate(values, min))
    suffix_max = list(accumulate(reversed(values), max))[::-1]
    size = len(values)
    i = j = 0
    best = -1
    while i < size and j < size:
        if prefix_min[i] <= suffix_max[j]:
            best = max(best, j - i)
            j += 1
        else:
            i += 1
    return best


def pair_nuts_and_bolts(nuts, bolts):
    """Match nuts with bolts of the same kind; return the matched kinds in sorted order."""
    available = Counter(bolts)
    matched = []
    for nut in sorted(nuts):
        if available[nut] > 0:
            matched.append(nut)
            available[nut] -= 1
    return matched


def closest_to_zero_sum(values):
    """Return the sum of the two elements whose sum is closest to zero."""
    ordered = sorted(values, key=abs)
    if len(ordered) < 2:
        raise ValueError("at least two values are required")
    best = None
    for first, second in zip(ordered, ordered[1:]):
        total = first + second
        if best is None or abs(total) <= abs(best):
            best = total
    return best


def wave_array(values):
    """Return the sorted values rearranged so that a[0] >= a[1] <= a[2] >= a[3] ..."""
    ordered = sorted(values)
    result = []
    for low, high in zip(ordered[0::2], ordered[1::2]):
        result.extend((high, low))
    if len(ordered) % 2:
        result.append(ordered[-1])
    return result


def majority_element(values):
    """Return the element occurring more than half the time, or None if there is none."""
    values = list(values)
    if not values:
        return None
    value, occurrences = Counter(values).most_common(1)[0]
    return value if occurrences > len(values) // 2 else None


def smallest_missing_positive(values):
    """Return the smallest positive integer absent from ``values``."""
    present = set(values)
    return next(candidate for candidate in count(1) if candidate not in present)


def reverse_in_place(values):
    """Reverse a mutable sequence in place."""
    values.reverse()


def deque_demo() -> dict[str, Any]:
    """Exercise a double-ended queue and report what was observed."""
    items: deque[int] = deque()
    items.append(10)
    items.appendleft(20)
    items.pop()
    items.popleft()
    items.extend((1, 2, 3))

    report = {
        "front": items[0],
        "back": items[-1],
        "index1": items[1],
        "index2": items[2],
        "empty": not items,
        "size": len(items),
    }
    items.clear()
    return report