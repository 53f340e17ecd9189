"""Binary search problems."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence


def _pairs_within(nums: Sequence[int], distance: int) -> int:
    count = 0
    left = 0
    for right, value in enumerate(nums):
        while value - nums[left] > distance:
            left += 1
        count += right - left
    return count


def smallest_distance_pair(nums: Iterable[int], k: int) -> int:
    """Return the k-th smallest absolute difference among all pairs of values."""
    values = sorted(nums)
    if not values:
        raise ValueError("no numbers given")
    low, high = 0, values[-1] - values[0]
    while low < high:
        mid = (low + high) // 2
        if _pairs_within(values, mid) >= k:
            high = mid
        else:
            low = mid + 1
    return low


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in 1..n, or -1.

    guess(num) returns -1 if num is too high, 1 if too low, and 0 if it is right.
    """
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer == 1:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def find_right_interval(intervals: Sequence[Sequence[int]]) -> list[int]:
    """For each interval, return the index of the interval with the smallest start
    not below its end, or -1 if there is none."""
    starts = sorted((interval[0], index) for index, interval in enumerate(intervals))
    keys = [start for start, _ in starts]
    result = []
    for _, end in intervals:
        position = bisect_left(keys, end)
        result.append(starts[position][1] if position < len(starts) else -1)
    return result


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """Return the first version in 1..n for which is_bad_version is true."""
    low, high = 1, n
    while low < high:
        mid = (low + high) // 2
        if is_bad_version(mid):
            high = mid
        else:
            low = mid + 1
    return low