"""Selection problems solved with binary heaps."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def _check_k(k: int) -> None:
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")


def find_kth_largest(nums: Iterable[int], k: int) -> int:
    """Return the k-th largest value; the smallest if there are fewer than k."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    largest = heapq.nlargest(k, nums)
    if not largest:
        raise ValueError("no numbers given")
    return largest[-1]


def k_closest(points: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Return the k points nearest the origin, farthest first.

    Among points at equal distance the earlier ones are kept.
    """
    _check_k(k)
    nearest = heapq.nsmallest(
        k,
        range(len(points)),
        key=lambda i: (points[i][0] ** 2 + points[i][1] ** 2, i),
    )
    return [list(points[i]) for i in reversed(nearest)]


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the k most frequent values, least frequent first.

    Ties in frequency are broken in favour of the larger value.
    """
    _check_k(k)
    counts = Counter(nums)
    top = heapq.nlargest(k, ((freq, num) for num, freq in counts.items()))
    return [num for _, num in reversed(top)]


def find_closest_elements(arr: Iterable[int], k: int, x: int) -> list[int]:
    """Return the k values closest to x, smaller values winning ties, sorted."""
    _check_k(k)
    return sorted(heapq.nsmallest(k, arr, key=lambda value: (abs(value - x), value)))


def _gain(passed: int, total: int) -> float:
    return (passed + 1) / (total + 1) - passed / total


def max_average_ratio(classes: Iterable[Sequence[int]], extra_students: int) -> float:
    """Assign extra passing students to maximise the average pass ratio."""
    if extra_students < 0:
        raise ValueError(f"extra_students must not be negative, got {extra_students}")
    heap = [(-_gain(passed, total), passed, total) for passed, total in classes]
    if not heap:
        raise ValueError("no classes given")
    heapq.heapify(heap)
    for _ in range(extra_students):
        _, passed, total = heap[0]
        heapq.heapreplace(heap, (-_gain(passed + 1, total + 1), passed + 1, total + 1))
    return sum(passed / total for _, passed, total in heap) / len(heap)